"""Colours and fonts used when drawing benchmark plots."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from enum import IntEnum

_PALETTE: tuple[tuple[int, int, int], ...] = (
    (255, 131, 0),
    (1, 92, 191),
    (150, 222, 0),
    (0, 222, 189),
    (0xDE, 0x9C, 0x9C),
    (0xA4, 0x7E, 0xD3),
)


class FontType(IntEnum):
    """Text elements of a plot that carry their own font."""

    Title = 0
    Subtitle = 1
    Legend = 2
    XAxis = 3
    YAxis = 4


@dataclass(frozen=True)
class Font:
    """Weight and size of a piece of plot text."""

    bold: bool
    point_size: int

    @property
    def weight(self) -> str:
        return "bold" if self.bold else "normal"


_GUI_FONTS: dict[FontType, Font] = {
    FontType.Title: Font(True, 19),
    FontType.Subtitle: Font(True, 9),
    FontType.XAxis: Font(False, 8),
    FontType.YAxis: Font(True, 8),
    FontType.Legend: Font(True, 10),
}

_PAPER_FONTS: dict[FontType, Font] = {
    FontType.Title: Font(True, 28),
    FontType.Subtitle: Font(True, 18),
    FontType.XAxis: Font(False, 16),
    FontType.YAxis: Font(True, 16),
    FontType.Legend: Font(True, 20),
}


def _lighter(rgb: tuple[int, int, int], factor: int) -> tuple[int, int, int]:
    h, s, v = colorsys.rgb_to_hsv(*(channel / 255 for channel in rgb))
    v = v * factor / 100
    if v > 1.0:
        s = max(0.0, s - (v - 1.0))
        v = 1.0
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return round(r * 255), round(g * 255), round(b * 255)


def _darker(rgb: tuple[int, int, int], factor: int) -> tuple[int, int, int]:
    if factor <= 0:
        return rgb
    if factor < 100:
        return _lighter(rgb, 10000 // factor)
    # With hue and saturation fixed, scaling the HSV value scales every channel alike.
    r, g, b = (round(channel * 100 / factor) for channel in rgb)
    return r, g, b


def color(index: int, darker: int = 125, alpha: int = 255) -> tuple[int, int, int, int]:
    """Return palette colour ``index`` (cycling) darkened by ``darker`` percent, as RGBA."""
    r, g, b = _darker(_PALETTE[index % len(_PALETTE)], darker)
    return r, g, b, alpha


def gui_font(font_type: FontType) -> Font:
    """Return the on-screen font for a plot element."""
    return _GUI_FONTS[FontType(font_type)]


def paper_font(font_type: FontType) -> Font:
    """Return the font used for saved, print-sized plots."""
    return _PAPER_FONTS[FontType(font_type)]