"""Colors, palette entries and the default terminal palette."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TABLE_COLORS = 20

_USHRT_MAX = 0xFFFF


def _round(x: float) -> int:
    """Round half away from zero."""
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


@dataclass(frozen=True)
class Color:
    """An opaque RGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def _hsv16(self) -> tuple[int, int, int]:
        r, g, b = self.red / 255, self.green / 255, self.blue / 255
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low
        value = _round(high * _USHRT_MAX)
        if delta == 0:
            return _USHRT_MAX, 0, value
        saturation = _round(delta / high * _USHRT_MAX)
        if r == high:
            hue = (g - b) / delta
        elif g == high:
            hue = 2.0 + (b - r) / delta
        else:
            hue = 4.0 + (r - g) / delta
        hue *= 60.0
        if hue < 0:
            hue += 360.0
        return _round(hue * 100), saturation, value

    def hue(self) -> int:
        """HSV hue in degrees (0-359), or -1 for achromatic colors."""
        hue16 = self._hsv16()[0]
        return -1 if hue16 == _USHRT_MAX else hue16 // 100

    def saturation(self) -> int:
        """HSV saturation, 0-255."""
        return self._hsv16()[1] >> 8

    def value(self) -> int:
        """HSV value (brightness), 0-255."""
        return self._hsv16()[2] >> 8

    @staticmethod
    def from_hsv(hue: int, saturation: int, value: int) -> "Color":
        """Build a color from HSV; a hue of -1 means achromatic."""
        if hue < -1 or not 0 <= saturation <= 255 or not 0 <= value <= 255:
            raise ValueError(f"HSV parameters out of range: {hue}, {saturation}, {value}")
        hue16 = _USHRT_MAX if hue == -1 else (hue % 360) * 100
        sat16 = saturation * 0x101
        val16 = value * 0x101
        if sat16 == 0 or hue16 == _USHRT_MAX:
            channel = val16 >> 8
            return Color(channel, channel, channel)
        h = 0.0 if hue16 == 36000 else hue16 / 6000
        s = sat16 / _USHRT_MAX
        v = val16 / _USHRT_MAX
        sector = int(h)
        f = h - sector
        p = v * (1 - s)
        if sector & 1:
            q = v * (1 - s * f)
            rgb = {1: (q, v, p), 3: (p, q, v), 5: (v, p, q)}[sector]
        else:
            t = v * (1 - s * (1 - f))
            rgb = {0: (v, t, p), 2: (p, v, t), 4: (t, p, v)}[sector]
        r, g, b = (_round(c * _USHRT_MAX) >> 8 for c in rgb)
        return Color(r, g, b)


class FontWeight(enum.Enum):
    """How text drawn in a palette color is weighted."""

    BOLD = "bold"
    USE_CURRENT_FORMAT = "use-current-format"


@dataclass
class ColorEntry:
    """One entry of a terminal palette."""

    color: Color = Color(0, 0, 0)
    transparent: bool = False
    font_weight: FontWeight = FontWeight.USE_CURRENT_FORMAT


_COLOR_NAMES = (
    "Foreground",
    "Background",
    "Color0",
    "Color1",
    "Color2",
    "Color3",
    "Color4",
    "Color5",
    "Color6",
    "Color7",
    "ForegroundIntense",
    "BackgroundIntense",
    "Color0Intense",
    "Color1Intense",
    "Color2Intense",
    "Color3Intense",
    "Color4Intense",
    "Color5Intense",
    "Color6Intense",
    "Color7Intense",
)

_TRANSLATED_COLOR_NAMES = (
    "Foreground",
    "Background",
    "Color 1",
    "Color 2",
    "Color 3",
    "Color 4",
    "Color 5",
    "Color 6",
    "Color 7",
    "Color 8",
    "Foreground (Intense)",
    "Background (Intense)",
    "Color 1 (Intense)",
    "Color 2 (Intense)",
    "Color 3 (Intense)",
    "Color 4 (Intense)",
    "Color 5 (Intense)",
    "Color 6 (Intense)",
    "Color 7 (Intense)",
    "Color 8 (Intense)",
)

# Almost IBM standard colors, with slight gamma correction for the dim ones:
# the 8 ANSI colors in two intensities, preceded by foreground and background.
_DEFAULT_TABLE = (
    ((0x00, 0x00, 0x00), False), ((0xFF, 0xFF, 0xFF), True),
    ((0x00, 0x00, 0x00), False), ((0xB2, 0x18, 0x18), False),
    ((0x18, 0xB2, 0x18), False), ((0xB2, 0x68, 0x18), False),
    ((0x18, 0x18, 0xB2), False), ((0xB2, 0x18, 0xB2), False),
    ((0x18, 0xB2, 0xB2), False), ((0xB2, 0xB2, 0xB2), False),
    ((0x00, 0x00, 0x00), False), ((0xFF, 0xFF, 0xFF), True),
    ((0x68, 0x68, 0x68), False), ((0xFF, 0x54, 0x54), False),
    ((0x54, 0xFF, 0x54), False), ((0xFF, 0xFF, 0x54), False),
    ((0x54, 0x54, 0xFF), False), ((0xFF, 0x54, 0xFF), False),
    ((0x54, 0xFF, 0xFF), False), ((0xFF, 0xFF, 0xFF), False),
)


def _check_index(index: int) -> None:
    if not 0 <= index < TABLE_COLORS:
        raise IndexError(f"color index out of range: {index}")


def color_name_for_index(index: int) -> str:
    """Return the configuration key name of a palette index."""
    _check_index(index)
    return _COLOR_NAMES[index]


def translated_color_name_for_index(index: int) -> str:
    """Return the human-readable name of a palette index."""
    _check_index(index)
    return _TRANSLATED_COLOR_NAMES[index]


def default_color_table() -> list[ColorEntry]:
    """Return a fresh copy of the default palette."""
    return [ColorEntry(Color(*rgb), transparent) for rgb, transparent in _DEFAULT_TABLE]