"""Terminal color schemes: palette, randomization and .colorscheme files."""

from __future__ import annotations

import configparser
import copy as _copy
import random
from dataclasses import dataclass
from os import PathLike

from termcore.colors import (
    TABLE_COLORS,
    Color,
    ColorEntry,
    FontWeight,
    color_name_for_index,
    default_color_table,
)

MAX_HUE = 340

_DEFAULT_TABLE = default_color_table()


def _check_index(index: int) -> None:
    if not 0 <= index < TABLE_COLORS:
        raise IndexError(f"color index out of range: {index}")


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


@dataclass
class RandomizationRange:
    """How far each HSV component of a palette color may be randomized."""

    hue: int = 0
    saturation: int = 0
    value: int = 0

    def is_null(self) -> bool:
        return self.hue == 0 and self.saturation == 0 and self.value == 0


def _raw_value(raw: str) -> str | list[str]:
    raw = raw.strip()
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    if "," in raw:
        return [part.strip() for part in raw.split(",")]
    return raw


def _to_string(raw: str | None, default: str) -> str:
    if raw is None:
        return default
    value = _raw_value(raw)
    return ", ".join(value) if isinstance(value, list) else value


def _to_int(raw: str | None, default: int = 0) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def _to_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return 0.0


def _to_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    text = raw.strip().lower()
    return text not in ("", "0", "false")


class ColorScheme:
    """A palette of terminal colors plus background opacity."""

    def __init__(self, name: str = "", description: str = "") -> None:
        self.name = name
        self.description = description
        self.opacity = 1.0
        self._table: list[ColorEntry] | None = None
        self._random_table: list[RandomizationRange] | None = None

    def copy(self) -> "ColorScheme":
        """Return an independent copy of this scheme."""
        return _copy.deepcopy(self)

    def _active_table(self) -> list[ColorEntry]:
        return self._table if self._table is not None else _DEFAULT_TABLE

    def set_color_table_entry(self, index: int, entry: ColorEntry) -> None:
        _check_index(index)
        if self._table is None:
            self._table = default_color_table()
        self._table[index] = _copy.copy(entry)

    def color_entry(self, index: int, random_seed: int = 0) -> ColorEntry:
        """Return a palette entry, randomized if a nonzero seed is given."""
        _check_index(index)
        entry = _copy.copy(self._active_table()[index])
        if random_seed == 0 or self._random_table is None:
            return entry
        spread = self._random_table[index]
        if spread.is_null():
            return entry

        rng = random.Random(random_seed)
        hue_diff = rng.randrange(spread.hue) - spread.hue // 2 if spread.hue else 0
        sat_diff = (
            rng.randrange(spread.saturation) - spread.saturation // 2 if spread.saturation else 0
        )
        val_diff = rng.randrange(spread.value) - spread.value // 2 if spread.value else 0

        color = entry.color
        new_hue = abs(_c_mod(color.hue() + hue_diff, MAX_HUE))
        new_value = min(abs(color.value() + val_diff), 255)
        new_saturation = min(abs(color.saturation() + sat_diff), 255)
        entry.color = Color.from_hsv(new_hue, new_saturation, new_value)
        return entry

    def color_table(self, random_seed: int = 0) -> list[ColorEntry]:
        """Return all palette entries, randomized with the given seed."""
        return [self.color_entry(i, random_seed) for i in range(TABLE_COLORS)]

    def foreground_color(self) -> Color:
        return self._active_table()[0].color

    def background_color(self) -> Color:
        return self._active_table()[1].color

    def has_dark_background(self) -> bool:
        """True if the background's HSV value is below 127."""
        return self.background_color().value() < 127

    def randomized_background_color(self) -> bool:
        if self._random_table is None:
            return False
        return not self._random_table[1].is_null()

    def set_randomized_background_color(self, randomize: bool) -> None:
        if randomize:
            self.set_randomization_range(1, MAX_HUE, 255, 0)
        elif self._random_table is not None:
            self.set_randomization_range(1, 0, 0, 0)

    def set_randomization_range(self, index: int, hue: int, saturation: int, value: int) -> None:
        _check_index(index)
        if not 0 <= hue <= MAX_HUE:
            raise ValueError(f"hue range out of bounds: {hue}")
        if not 0 <= saturation <= 255 or not 0 <= value <= 255:
            raise ValueError(f"saturation/value range out of bounds: {saturation}, {value}")
        if self._random_table is None:
            self._random_table = [RandomizationRange() for _ in range(TABLE_COLORS)]
        self._random_table[index] = RandomizationRange(hue, saturation, value)

    def read(self, path: str | PathLike[str]) -> None:
        """Load description, opacity and palette from an INI color scheme file."""
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        parser.optionxform = str  # type: ignore[assignment]
        with open(path, encoding="utf-8") as handle:
            parser.read_file(handle)

        general = parser["General"] if parser.has_section("General") else {}
        self.description = _to_string(general.get("Description"), "Un-named Color Scheme")
        self.opacity = _to_float(general.get("Opacity"), 1.0)

        for index in range(TABLE_COLORS):
            name = color_name_for_index(index)
            section = parser[name] if parser.has_section(name) else {}
            self._read_color_entry(section, index)

    def _read_color_entry(self, section, index: int) -> None:
        raw = section.get("Color")
        rgb = _raw_value(raw) if raw is not None else []
        if isinstance(rgb, str):
            rgb = [rgb]
        if len(rgb) != 3:
            raise ValueError(
                f"color entry {color_name_for_index(index)!r} needs three components"
            )
        red, green, blue = (_to_int(part) for part in rgb)
        entry = ColorEntry(Color(red, green, blue))
        entry.transparent = _to_bool(section.get("Transparent"))
        if "Bold" in section:
            entry.font_weight = (
                FontWeight.BOLD if _to_bool(section.get("Bold")) else FontWeight.USE_CURRENT_FORMAT
            )

        hue = _to_int(section.get("MaxRandomHue")) & 0xFFFF
        value = _to_int(section.get("MaxRandomValue")) & 0xFF
        saturation = _to_int(section.get("MaxRandomSaturation")) & 0xFF

        self.set_color_table_entry(index, entry)
        if hue or value or saturation:
            self.set_randomization_range(index, hue, saturation, value)