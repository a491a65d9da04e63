"""
conversion/index.py — the document index space.

One index unit is one Unicode code point of preceding content. The body starts
at FIRST_INDEX (index 0 is reserved) and ranges are half-open [start, end).
"""

from __future__ import annotations

FIRST_INDEX = 1


def rune_length(text: str) -> int:
    """Length of `text` in index units (code points, never UTF-8 bytes)."""
    # str is a sequence of code points, so len() already counts runes
    return len(text)


def advance(cursor: int, text: str) -> int:
    """Cursor position after inserting `text` at `cursor`."""
    return cursor + rune_length(text)
