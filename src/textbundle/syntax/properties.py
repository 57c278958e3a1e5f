"""Parser for .properties sources.

Implements the line-oriented key/value grammar of Java property files:

    # comment              ! also a comment
    key = value            key: value            key value
    multi = first \\
            second         (continuation: odd number of trailing backslashes)
    path = C:\\\\temp       (escaped backslash)
    unicode = caf\\u00e9    (UTF-16 code unit escape)

Parsing is total except for malformed \\uXXXX escapes, which raise
PropertiesSyntaxError. Duplicate keys keep the last value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterator

from textbundle.diagnostics import PropertiesSyntaxError

__all__ = ["parse_properties"]

# Natural line terminators recognized by the grammar. str.splitlines() is
# not used because it also splits on \v, \f and Unicode separators.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Whitespace inside a line: space, tab, form feed
_WHITESPACE = " \t\f"

_COMMENT_MARKERS = "#!"

_KEY_TERMINATORS = "=:"

_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_properties(source: str, *, source_path: str | None = None) -> dict[str, str]:
    """Parse .properties source into a dict.

    Args:
        source: Decoded file contents
        source_path: Human-readable origin used in error messages (optional)

    Returns:
        Mapping of unescaped keys to unescaped values, in file order

    Raises:
        PropertiesSyntaxError: If a \\uXXXX escape is malformed

    Example:
        >>> parse_properties("greeting = Hello\\nfarewell: Bye")
        {'greeting': 'Hello', 'farewell': 'Bye'}
    """
    entries: dict[str, str] = {}
    for line_number, line in _logical_lines(source):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number, source_path)
        entries[key] = _unescape(raw_value, line_number, source_path)
    return entries


def _logical_lines(source: str) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, logical line) pairs, skipping comments and blanks."""
    natural = _LINE_BREAK.split(source)
    index = 0
    while index < len(natural):
        line_number = index + 1
        line = natural[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in _COMMENT_MARKERS:
            continue

        while _ends_with_continuation(line):
            line = line[:-1]
            if index >= len(natural):
                break
            line += natural[index].lstrip(_WHITESPACE)
            index += 1

        yield line_number, line


def _ends_with_continuation(line: str) -> bool:
    """Check for an odd number of trailing backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    length = len(line)
    pos = 0
    while pos < length:
        char = line[pos]
        if char == "\\":
            pos += 2
            continue
        if char in _KEY_TERMINATORS or char in _WHITESPACE:
            break
        pos += 1
    key_end = min(pos, length)

    while pos < length and line[pos] in _WHITESPACE:
        pos += 1
    if pos < length and line[pos] in _KEY_TERMINATORS:
        pos += 1
    while pos < length and line[pos] in _WHITESPACE:
        pos += 1

    return line[:key_end], line[pos:]


def _unescape(raw: str, line_number: int, source_path: str | None) -> str:
    """Resolve backslash escapes.

    Raises:
        PropertiesSyntaxError: If a \\uXXXX escape is truncated or not hexadecimal
    """
    if "\\" not in raw:
        return raw

    chars: list[str] = []
    has_code_units = False
    pos = 0
    length = len(raw)
    while pos < length:
        char = raw[pos]
        pos += 1
        if char != "\\":
            chars.append(char)
            continue
        if pos >= length:
            break

        escaped = raw[pos]
        pos += 1
        if escaped == "u":
            digits = raw[pos : pos + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                msg = f"Malformed \\uxxxx encoding: \\u{digits}"
                raise PropertiesSyntaxError(msg, line_number, source_path)
            chars.append(chr(int(digits, 16)))
            has_code_units = True
            pos += 4
        else:
            chars.append(_SIMPLE_ESCAPES.get(escaped, escaped))

    text = "".join(chars)
    if has_code_units:
        # Combine escaped UTF-16 surrogate pairs into single code points
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return text
