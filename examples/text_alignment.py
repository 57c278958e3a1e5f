"""LineArray Example - Trimming and Aligning Blocks of Text.

Python 3.13+.
"""

from __future__ import annotations

from textbundle import Alignment, LineArray, lines_of
from textbundle.text import Changed, Unchanged


def example_1_alignment() -> None:
    """Example 1: Left, right and centre alignment."""
    print("=" * 60)
    print("Example 1: Alignment")
    print("=" * 60)

    block = lines_of("Name", "Quantity", "Total")
    for alignment in Alignment:
        print(f"\n{alignment}:")
        for line in block.align(alignment):
            print(f"  |{line}|")


def example_2_trim() -> None:
    """Example 2: Trimming before alignment."""
    print("\n" + "=" * 60)
    print("Example 2: Trim")
    print("=" * 60)

    raw = LineArray(["   apples ", "\tpears", "plums   "])
    match raw.try_trim():
        case Changed(lines):
            print(f"  trimmed to new instance: {lines!r}")
            for line in lines.to_right_aligned():
                print(f"  |{line}|")
        case Unchanged(lines):
            print(f"  already clean: {lines!r}")

    clean = lines_of("a", "b")
    print(f"  clean.trim() is clean: {clean.trim() is clean}")


if __name__ == "__main__":
    example_1_alignment()
    example_2_trim()
