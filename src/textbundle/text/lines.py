"""Immutable block of text lines with trimming and alignment.

LineArray wraps an ordered sequence of lines and produces equal-width,
space-padded variants of it:

    >>> block = lines_of("a", "bbb", "cc")
    >>> block.to_right_aligned()
    ['  a', 'bbb', ' cc']
    >>> block.to_centre_aligned()
    [' a ', 'bbb', ' cc']

The lines are copied on construction and never exposed by reference.
Every alignment returns a fresh list the caller may modify freely.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from textbundle.constants import PAD_CHAR
from textbundle.enums import Alignment

__all__ = [
    "Changed",
    "LineArray",
    "TrimResult",
    "Unchanged",
    "lines_of",
]


@dataclass(frozen=True, slots=True)
class Unchanged:
    """Trimming left the lines as they were.

    Attributes:
        lines: The original LineArray (same object)
    """

    lines: LineArray


@dataclass(frozen=True, slots=True)
class Changed:
    """Trimming produced different lines.

    Attributes:
        lines: A new LineArray over the trimmed lines
    """

    lines: LineArray


type TrimResult = Unchanged | Changed
"""Tagged outcome of LineArray.try_trim()."""


class LineArray:
    """Ordered, immutable sequence of text lines.

    Equality and hashing are structural over the lines and the trimmed flag.
    The flag is the only state that ever changes: trim() sets it on an
    instance whose lines turn out to need no trimming. Instances used as
    dict keys or set members should therefore be trimmed first.

    Attributes:
        lines: The lines as a tuple
        trimmed: Whether the lines are known to be free of surrounding whitespace
    """

    __slots__ = ("_lines", "_trimmed")

    def __init__(self, lines: Iterable[str]) -> None:
        """Copy lines into a new LineArray.

        Args:
            lines: Text lines; any iterable of str except a bare str

        Raises:
            TypeError: If lines is None, a str, or contains a non-str entry
        """
        if lines is None:
            msg = "lines must not be None"
            raise TypeError(msg)
        if isinstance(lines, str):
            msg = "lines must be an iterable of str, not a single str"
            raise TypeError(msg)

        copied = tuple(lines)
        for index, line in enumerate(copied):
            if not isinstance(line, str):
                msg = f"line {index} must be str, got {type(line).__name__}"
                raise TypeError(msg)

        self._lines: tuple[str, ...] = copied
        self._trimmed = False

    @classmethod
    def _from_trimmed(cls, lines: tuple[str, ...]) -> LineArray:
        """Create an instance already marked as trimmed."""
        instance = cls(lines)
        instance._trimmed = True
        return instance

    @property
    def lines(self) -> tuple[str, ...]:
        """The current lines."""
        return self._lines

    @property
    def trimmed(self) -> bool:
        """Whether the lines are known to be trimmed."""
        return self._trimmed

    def trim(self) -> LineArray:
        """Return a LineArray whose lines have no surrounding whitespace.

        Identity is preserved where possible:
        - already marked trimmed: returns self
        - stripping changes nothing: marks self as trimmed, returns self
        - otherwise: returns a new instance, marked trimmed

        Returns:
            self or a new trimmed LineArray
        """
        return self.try_trim().lines

    def try_trim(self) -> TrimResult:
        """Trim, reporting whether a new instance was needed.

        Returns:
            Unchanged(self) if no line had surrounding whitespace,
            Changed(new_instance) otherwise

        Example:
            >>> match lines_of(" a").try_trim():
            ...     case Changed(lines):
            ...         print(lines.lines)
            ('a',)
        """
        if self._trimmed:
            return Unchanged(self)

        stripped = tuple(line.strip() for line in self._lines)
        if stripped == self._lines:
            self._trimmed = True
            return Unchanged(self)

        return Changed(LineArray._from_trimmed(stripped))

    def max_line_length(self) -> int:
        """Return the length of the longest line, or -1 if there are no lines."""
        return max((len(line) for line in self._lines), default=-1)

    def to_left_aligned(self) -> list[str]:
        """Return the lines padded on the right to equal width."""
        return self.align(Alignment.LEFT)

    def to_right_aligned(self) -> list[str]:
        """Return the lines padded on the left to equal width."""
        return self.align(Alignment.RIGHT)

    def to_centre_aligned(self) -> list[str]:
        """Return the lines centred within equal width.

        Of a padding need n, n // 2 spaces go on the right and the rest on
        the left, so an odd space lands on the left.
        """
        return self.align(Alignment.CENTRE)

    def align(self, alignment: Alignment | str) -> list[str]:
        """Return the lines padded with spaces to max_line_length().

        Computed from a snapshot of the lines; the instance is not modified,
        so repeated calls return equal results.

        Args:
            alignment: Alignment member or its value ("left", "right", "centre")

        Returns:
            New list of equal-width lines

        Raises:
            ValueError: If alignment is not a known Alignment value
        """
        alignment = Alignment(alignment)
        width = self.max_line_length()

        padded: list[str] = []
        for line in self._lines:
            need = width - len(line)
            match alignment:
                case Alignment.LEFT:
                    left, right = 0, need
                case Alignment.RIGHT:
                    left, right = need, 0
                case Alignment.CENTRE:
                    right = need // 2
                    left = need - right
            padded.append(f"{PAD_CHAR * left}{line}{PAD_CHAR * right}")
        return padded

    def __eq__(self, other: object) -> bool:
        """Compare lines and trimmed flag."""
        if not isinstance(other, LineArray):
            return NotImplemented
        return self._lines == other._lines and self._trimmed == other._trimmed

    def __hash__(self) -> int:
        """Hash lines and trimmed flag."""
        return hash((self._lines, self._trimmed))

    def __len__(self) -> int:
        """Return number of lines."""
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the lines."""
        return iter(self._lines)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LineArray({list(self._lines)!r}, trimmed={self._trimmed})"


def lines_of(*lines: str) -> LineArray:
    """Return a LineArray over the given lines.

    Raises:
        TypeError: If any line is not a str
    """
    return LineArray(lines)
