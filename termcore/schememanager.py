"""Discovery, loading and caching of terminal color schemes."""

from __future__ import annotations

import configparser
import logging
import re
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from termcore.colors import TABLE_COLORS, Color, ColorEntry, FontWeight
from termcore.colorscheme import ColorScheme

logger = logging.getLogger(__name__)

_COMMENT = re.compile(r"#.*$")
_MAX_COLOR_VALUE = 255
_NATIVE_SUFFIX = ".colorscheme"
_KDE3_SUFFIX = ".schema"

_DEFAULT_SCHEME = ColorScheme()


def _to_int(text: str) -> int:
    """Parse an integer, yielding 0 for text that is not one."""
    try:
        return int(text)
    except ValueError:
        return 0


def _base_name(path: str | PathLike[str]) -> str:
    """File name up to its first dot."""
    return Path(path).name.split(".", 1)[0]


class KDE3ColorSchemeReader:
    """Reads a color scheme in the older line-based ``.schema`` format.

    Only the title and the palette entries are understood; every other
    directive is ignored.
    """

    def __init__(self, stream: Iterable[str | bytes]) -> None:
        self._stream = stream

    def read(self) -> ColorScheme:
        """Parse the whole stream and return the scheme it describes."""
        scheme = ColorScheme()
        for raw in self._stream:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8", errors="replace")
            line = " ".join(_COMMENT.sub("", raw).split())
            if not line:
                continue
            if line.startswith("color"):
                if not self._read_color_line(line, scheme):
                    logger.debug("failed to read color scheme line %r", line)
            elif line.startswith("title"):
                if not self._read_title_line(line, scheme):
                    logger.debug("failed to read color scheme title line %r", line)
            else:
                logger.debug("color scheme contains an unsupported feature: %r", line)
        return scheme

    @staticmethod
    def _read_color_line(line: str, scheme: ColorScheme) -> bool:
        fields = line.split(" ")
        if len(fields) != 7 or fields[0] != "color":
            return False
        index, red, green, blue, transparent, bold = (_to_int(f) for f in fields[1:])
        if (
            not 0 <= index < TABLE_COLORS
            or not 0 <= red <= _MAX_COLOR_VALUE
            or not 0 <= green <= _MAX_COLOR_VALUE
            or not 0 <= blue <= _MAX_COLOR_VALUE
            or transparent not in (0, 1)
            or bold not in (0, 1)
        ):
            return False
        entry = ColorEntry(
            Color(red, green, blue),
            transparent=bool(transparent),
            font_weight=FontWeight.BOLD if bold else FontWeight.USE_CURRENT_FORMAT,
        )
        scheme.set_color_table_entry(index, entry)
        return True

    @staticmethod
    def _read_title_line(line: str, scheme: ColorScheme) -> bool:
        if not line.startswith("title"):
            return False
        _, space, description = line.partition(" ")
        if not space:
            return False
        scheme.description = description
        return True


class ColorSchemeManager:
    """Finds, loads and caches the color schemes kept in one directory."""

    def __init__(self, schemes_dir: str | PathLike[str]) -> None:
        self.schemes_dir = Path(schemes_dir)
        self._color_schemes: dict[str, ColorScheme] = {}
        self._have_loaded_all = False

    def default_color_scheme(self) -> ColorScheme:
        """Return the built-in default scheme."""
        return _DEFAULT_SCHEME

    def find_color_scheme(self, name: str) -> ColorScheme | None:
        """Return the named scheme, loading it on first use.

        An empty name yields the default scheme; an unknown one yields None.
        """
        if not name:
            return self.default_color_scheme()
        if name in self._color_schemes:
            return self._color_schemes[name]
        path = self._find_color_scheme_path(name)
        if self._load_color_scheme(path) or self._load_kde3_color_scheme(path):
            found = self._color_schemes.get(name)
            if found is not None:
                return found
        logger.debug("could not find color scheme %r", name)
        return None

    def delete_color_scheme(self, name: str) -> bool:
        """Delete a loaded scheme and its file; False if the file stays."""
        if name not in self._color_schemes:
            raise KeyError(name)
        path = self._find_color_scheme_path(name)
        try:
            path.unlink()
        except OSError:
            logger.debug("failed to remove color scheme %s", path)
            return False
        del self._color_schemes[name]
        return True

    def all_color_schemes(self) -> list[ColorScheme]:
        """Return every scheme available, loading all of them the first time."""
        if not self._have_loaded_all:
            self._load_all_color_schemes()
        return list(self._color_schemes.values())

    def load_custom_color_scheme(self, path: str | PathLike[str]) -> bool:
        """Load a ``.colorscheme`` or ``.schema`` file, named after its base name."""
        text = str(path)
        if text.endswith(_NATIVE_SUFFIX):
            return self._load_color_scheme(path)
        if text.endswith(_KDE3_SUFFIX):
            return self._load_kde3_color_scheme(path)
        return False

    def _load_all_color_schemes(self) -> None:
        failed = 0
        for path in self._list_schemes(_NATIVE_SUFFIX):
            if not self._load_color_scheme(path):
                failed += 1
        for path in self._list_schemes(_KDE3_SUFFIX):
            if not self._load_kde3_color_scheme(path):
                failed += 1
        if failed:
            logger.debug("failed to load %d color schemes", failed)
        self._have_loaded_all = True

    def _list_schemes(self, suffix: str) -> list[Path]:
        if not self.schemes_dir.is_dir():
            return []
        return sorted(self.schemes_dir.glob("*" + suffix), key=lambda p: p.name)

    def _find_color_scheme_path(self, name: str) -> Path:
        return self.schemes_dir / (name + _NATIVE_SUFFIX)

    def _register(self, name: str, scheme: ColorScheme) -> None:
        if name in self._color_schemes:
            logger.debug("color scheme %r has already been found, ignoring", name)
        else:
            self._color_schemes[name] = scheme

    def _load_color_scheme(self, path: str | PathLike[str]) -> bool:
        if not str(path).endswith(_NATIVE_SUFFIX) or not Path(path).exists():
            return False
        name = _base_name(path)
        scheme = ColorScheme(name)
        try:
            scheme.read(path)
        except (OSError, ValueError, configparser.Error) as exc:
            logger.debug("could not read color scheme %s: %s", path, exc)
            return False
        if not scheme.name:
            logger.debug("color scheme in %s has no valid name", path)
            return False
        self._register(name, scheme)
        return True

    def _load_kde3_color_scheme(self, path: str | PathLike[str]) -> bool:
        if not str(path).endswith(_KDE3_SUFFIX):
            return False
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                scheme = KDE3ColorSchemeReader(handle).read()
        except OSError:
            return False
        scheme.name = _base_name(path)
        if not scheme.name:
            logger.debug("color scheme name is not valid")
            return False
        self._register(scheme.name, scheme)
        return True