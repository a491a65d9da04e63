"""
Shared primitive types used by documents and operations.

Mapping onto the Google Docs API:
  NamedStyle   -> ParagraphStyle.namedStyleType
  Alignment    -> ParagraphStyle.alignment
  BulletPreset -> CreateParagraphBulletsRequest.bulletPreset
  RgbColor     -> OptionalColor.color.rgbColor
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# ---------------------------------------------------------------------------
# Enumerations (opaque to the core, passed through to the service unchanged)
# ---------------------------------------------------------------------------

class NamedStyle(StrEnum):
    NORMAL    = "NORMAL_TEXT"
    TITLE     = "TITLE"
    SUBTITLE  = "SUBTITLE"
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"


class Alignment(StrEnum):
    START     = "START"
    CENTER    = "CENTER"
    END       = "END"
    JUSTIFIED = "JUSTIFIED"


class BulletPreset(StrEnum):
    BULLET   = "BULLET_DISC_CIRCLE_SQUARE"
    NUMBERED = "NUMBERED_DECIMAL_ALPHA_ROMAN"


class HeaderFooterType(StrEnum):
    DEFAULT = "DEFAULT"


_HEADING_LEVELS = {
    style: int(style.removeprefix("HEADING_"))
    for style in NamedStyle
    if style.startswith("HEADING_")
}


def heading_style(level: int) -> str:
    """HEADING_<level> without clamping; the service rejects levels it does not know."""
    return f"HEADING_{level}"


def heading_level(named_style: str | None) -> int | None:
    """Returns n for HEADING_1..HEADING_6, None for every other style (including absent)."""
    if not named_style:
        return None
    return _HEADING_LEVELS.get(named_style)


# ---------------------------------------------------------------------------
# RgbColor
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class RgbColor:
    """Color with channels in 0.0..1.0, as the service expects them."""
    red:   float
    green: float
    blue:  float

    def to_api(self) -> dict:
        return {"color": {"rgbColor": {"red": self.red, "green": self.green, "blue": self.blue}}}

    @classmethod
    def from_api(cls, data: dict | None) -> RgbColor | None:
        rgb = ((data or {}).get("color") or {}).get("rgbColor")
        if rgb is None:
            return None
        # the service omits zero channels
        return cls(
            red=float(rgb.get("red", 0.0)),
            green=float(rgb.get("green", 0.0)),
            blue=float(rgb.get("blue", 0.0)),
        )
