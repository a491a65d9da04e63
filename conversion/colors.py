"""conversion/colors.py — hex color strings to service colors."""

from __future__ import annotations

import re

from data_model import InputFormatError, RgbColor

_HEX6_RE = re.compile(r"[0-9A-Fa-f]{6}")


def parse_color(text: str | None) -> RgbColor | None:
    """
    Parses "RRGGBB" or "#RRGGBB".

    Exactly six hex digits are required; anything else returns None rather
    than a partially parsed color.
    """
    if not text:
        return None
    digits = text.removeprefix("#")
    if not _HEX6_RE.fullmatch(digits):
        return None
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RgbColor(red=r / 255.0, green=g / 255.0, blue=b / 255.0)


def require_color(text: str | None) -> RgbColor:
    color = parse_color(text)
    if color is None:
        raise InputFormatError(
            f"invalid color {text!r}: expected 6 hex digits, e.g. #FF0000"
        )
    return color
