"""Text drawing flags and 16-bit colour helpers."""

from __future__ import annotations

from enum import IntFlag

__all__ = [
    "TextFlag",
    "BLINK",
    "TIMEHOUR",
    "FONT_MASK",
    "OPACITY_MAX",
    "number_mode",
    "font_index",
    "font_flag",
    "argb_split",
    "rgb_split",
    "rgb_join",
    "get_red",
    "get_green",
    "get_blue",
    "opacity",
    "rgb",
    "argb",
    "color_to_flags",
    "color_value",
    "color_mask",
]

_UINT16 = 0xFFFF
_UINT32 = 0xFFFFFFFF


class TextFlag(IntFlag):
    """Flags accepted by text and number drawing."""

    LEFT = 0x00
    VCENTERED = 0x02
    CENTERED = 0x04
    RIGHT = 0x08
    LEADING0 = 0x10
    PREC1 = 0x20
    PREC2 = 0x30
    NO_UNIT = 0x40
    SHADOWED = 0x80
    SPACING_NUMBERS_CONST = 0x2000
    VERTICAL = 0x4000


# Obsolete flags, kept as no-ops.
BLINK = 0
TIMEHOUR = 0

FONT_MASK = 0x0F00
OPACITY_MAX = 0x0F


def number_mode(flags: int) -> int:
    """Number display mode: -1 plain, 0 leading zero, 1 one decimal, 2 two decimals."""
    return ((int(flags) & 0x30) - 0x10) >> 4


def font_index(flags: int) -> int:
    """The font index stored in ``flags``."""
    return (int(flags) & FONT_MASK) >> 8


def font_flag(index: int) -> int:
    """The flag bits selecting font ``index``."""
    return (int(index) << 8) & _UINT32


def argb_split(color: int) -> tuple[int, int, int, int]:
    """Split a 4444 ARGB colour into its (a, r, g, b) components."""
    return (
        (color & 0xF000) >> 12,
        (color & 0x0F00) >> 8,
        (color & 0x00F0) >> 4,
        color & 0x000F,
    )


def rgb_split(color: int) -> tuple[int, int, int]:
    """Split a 565 RGB colour into its (r, g, b) components."""
    return (color & 0xF800) >> 11, (color & 0x07E0) >> 5, color & 0x001F


def rgb_join(r: int, g: int, b: int) -> int:
    """Join 565 components into one colour value."""
    return (r << 11) + (g << 5) + b


def get_red(color: int) -> int:
    """Red channel of a 565 colour, scaled to eight bits."""
    return (color & 0xF800) >> 8


def get_green(color: int) -> int:
    """Green channel of a 565 colour, scaled to eight bits."""
    return (color & 0x07E0) >> 3


def get_blue(color: int) -> int:
    """Blue channel of a 565 colour, scaled to eight bits."""
    return (color & 0x001F) << 3


def opacity(value: int) -> int:
    """Clamp an opacity value to its four bits."""
    return value & OPACITY_MAX


def rgb(r: int, g: int, b: int) -> int:
    """Build a 565 colour from eight-bit channels."""
    return (((r & 0xF8) << 8) + ((g & 0xFC) << 3) + ((b & 0xF8) >> 3)) & _UINT16


def argb(a: int, r: int, g: int, b: int) -> int:
    """Build a 4444 ARGB colour from eight-bit channels."""
    return (
        ((a & 0xF0) << 8) + ((r & 0xF0) << 4) + (g & 0xF0) + ((b & 0xF0) >> 4)
    ) & _UINT16


def color_to_flags(color: int) -> int:
    """Place a colour in the upper half of a flags word."""
    return (int(color) << 16) & _UINT32


def color_value(flags: int) -> int:
    """The colour stored in the upper half of ``flags``."""
    return (int(flags) & _UINT32) >> 16


def color_mask(flags: int) -> int:
    """Only the colour bits of ``flags``."""
    return int(flags) & 0xFFFF0000