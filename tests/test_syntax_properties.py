"""Tests for the .properties parser.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from textbundle.diagnostics import PropertiesSyntaxError, TextBundleError
from textbundle.syntax import parse_properties


class TestSeparators:
    """Key/value separators."""

    @pytest.mark.parametrize(
        "line",
        ["key=value", "key = value", "key:value", "key : value", "key value", "key\tvalue"],
    )
    def test_separator_forms(self, line: str) -> None:
        """'=', ':' and whitespace all separate key from value."""
        assert parse_properties(line) == {"key": "value"}

    def test_only_first_separator_consumed(self) -> None:
        """Later separators are part of the value."""
        assert parse_properties("url = http://host:80/a=b") == {"url": "http://host:80/a=b"}

    def test_whitespace_then_equals(self) -> None:
        """Whitespace followed by one '=' is a single separator."""
        assert parse_properties("key   =   = value") == {"key": "= value"}

    def test_key_without_value(self) -> None:
        """A bare key maps to the empty string."""
        assert parse_properties("empty") == {"empty": ""}
        assert parse_properties("empty =") == {"empty": ""}

    def test_trailing_whitespace_kept(self) -> None:
        """Whitespace after the value is significant."""
        assert parse_properties("key = value  ") == {"key": "value  "}

    def test_leading_whitespace_ignored(self) -> None:
        """Indentation before the key is ignored."""
        assert parse_properties("    key = value") == {"key": "value"}


class TestCommentsAndBlankLines:
    """Comments and blank lines."""

    def test_hash_and_bang_comments(self) -> None:
        """'#' and '!' start comments, also after indentation."""
        source = "# comment\n! also comment\n   # indented\nkey = value\n"
        assert parse_properties(source) == {"key": "value"}

    def test_hash_inside_value(self) -> None:
        """'#' after the start of a line is ordinary text."""
        assert parse_properties("colour = #ff0000") == {"colour": "#ff0000"}

    def test_blank_lines(self) -> None:
        """Blank and whitespace-only lines are skipped."""
        assert parse_properties("\n   \n\t\na = 1\n\n") == {"a": "1"}

    def test_empty_source(self) -> None:
        """Empty input yields no entries."""
        assert parse_properties("") == {}

    def test_comment_not_continued(self) -> None:
        """A trailing backslash does not continue a comment line."""
        assert parse_properties("# comment \\\nkey = value") == {"key": "value"}


class TestLineEndingsAndContinuation:
    """Natural lines and continuation lines."""

    @pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
    def test_line_endings(self, newline: str) -> None:
        """LF, CRLF and CR terminate lines."""
        assert parse_properties(f"a = 1{newline}b = 2") == {"a": "1", "b": "2"}

    def test_continuation(self) -> None:
        """Odd trailing backslash joins the next line without its indentation."""
        source = "fruits = apple, \\\n         banana, \\\n         pear"
        assert parse_properties(source) == {"fruits": "apple, banana, pear"}

    def test_even_backslashes_do_not_continue(self) -> None:
        """An escaped backslash at line end is a literal backslash."""
        assert parse_properties("path = C:\\\\\nnext = 1") == {"path": "C:\\", "next": "1"}

    def test_continuation_at_end_of_input(self) -> None:
        """A dangling continuation at EOF is dropped."""
        assert parse_properties("key = value\\") == {"key": "value"}

    def test_continuation_in_key(self) -> None:
        """A key can span lines."""
        assert parse_properties("long\\\n  key = v") == {"longkey": "v"}

    def test_vertical_tab_not_a_line_break(self) -> None:
        """Only CR and LF end natural lines."""
        assert parse_properties("key = a\vb") == {"key": "a\vb"}


class TestEscapes:
    """Backslash escapes."""

    def test_simple_escapes(self) -> None:
        """\\t, \\n, \\r and \\f are control characters."""
        assert parse_properties("key = a\\tb\\nc\\rd\\fe") == {"key": "a\tb\nc\rd\fe"}

    def test_unicode_escape(self) -> None:
        """\\uXXXX decodes a code unit."""
        assert parse_properties("cafe = caf\\u00e9") == {"cafe": "café"}

    def test_surrogate_pair_escape(self) -> None:
        """Escaped UTF-16 surrogate pairs combine into one code point."""
        assert parse_properties("smile = \\ud83d\\ude00") == {"smile": "\U0001f600"}

    def test_escaped_separator_in_key(self) -> None:
        """Escaped '=', ':' and spaces belong to the key."""
        assert parse_properties("a\\=b\\:c\\ d = v") == {"a=b:c d": "v"}

    def test_unknown_escape_is_literal(self) -> None:
        """Any other escaped character stands for itself."""
        assert parse_properties("key = \\q\\#") == {"key": "q#"}

    def test_literal_unicode_text(self) -> None:
        """Non-ASCII text needs no escaping."""
        assert parse_properties("greeting = Grüß Gott") == {"greeting": "Grüß Gott"}

    @pytest.mark.parametrize("source", ["key = \\u12", "key = \\uXYZW", "bad\\u00g1 = v"])
    def test_malformed_unicode_escape(self, source: str) -> None:
        """Truncated or non-hex \\u escapes raise PropertiesSyntaxError."""
        with pytest.raises(PropertiesSyntaxError, match="Malformed"):
            parse_properties(source)

    def test_error_reports_line_and_path(self) -> None:
        """The error carries the 1-based line number and the source path."""
        with pytest.raises(PropertiesSyntaxError) as exc_info:
            parse_properties("a = 1\n\nb = \\u00", source_path="msgs.properties")
        assert exc_info.value.line == 3
        assert exc_info.value.source_path == "msgs.properties"
        assert "msgs.properties:3" in str(exc_info.value)
        assert isinstance(exc_info.value, TextBundleError)


class TestDuplicatesAndOrder:
    """Duplicate keys and ordering."""

    def test_last_duplicate_wins(self) -> None:
        """Later definitions override earlier ones."""
        assert parse_properties("k = 1\nk = 2") == {"k": "2"}

    def test_file_order_preserved(self) -> None:
        """Keys keep their first-seen order."""
        assert list(parse_properties("b = 1\na = 2\nc = 3")) == ["b", "a", "c"]


_PLAIN = st.text(
    alphabet=st.characters(
        categories=("L", "N"),
        include_characters="._-",
    ),
    min_size=1,
    max_size=10,
)


class TestParserProperties:
    """Property-based checks."""

    @given(entries=st.dictionaries(_PLAIN, _PLAIN, max_size=10))
    def test_plain_entries_parse_back(self, entries: dict[str, str]) -> None:
        """Plain 'key = value' lines parse to the same dict."""
        event(f"entries={len(entries)}")
        source = "\n".join(f"{key} = {value}" for key, value in entries.items())
        assert parse_properties(source) == entries

    @given(source=st.text(alphabet="ab=:# \t\n\\!", max_size=40))
    def test_total_without_unicode_escapes(self, source: str) -> None:
        """Input without \\u never raises."""
        result = parse_properties(source)
        event(f"keys={len(result)}")
        assert all(isinstance(key, str) for key in result)
