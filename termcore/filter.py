"""Filters that find patterns in terminal text and mark them as hotspots."""

from __future__ import annotations

import abc
import enum
import re

from wcwidth import wcwidth


def _string_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


class HotSpotType(enum.Enum):
    """Hint for views on how to present a hotspot."""

    NOT_SPECIFIED = "not-specified"
    LINK = "link"
    MARKER = "marker"


class HotSpot(abc.ABC):
    """An area of text, from a start to an end position, that matched a filter."""

    def __init__(self, start_line: int, start_column: int, end_line: int, end_column: int) -> None:
        self.start_line = start_line
        self.start_column = start_column
        self.end_line = end_line
        self.end_column = end_column
        self.type = HotSpotType.NOT_SPECIFIED

    @abc.abstractmethod
    def activate(self, action: str = "") -> None:
        """Trigger the named action, or the default one for an empty name."""

    def actions(self) -> list:
        """Actions offered for this hotspot, e.g. in a context menu."""
        return []

    def tooltip(self) -> str:
        """Tooltip text, or an empty string for none."""
        return ""


class Filter(abc.ABC):
    """Scans a text buffer and records the hotspots it finds."""

    def __init__(self) -> None:
        self._hotspots: dict[int, list[HotSpot]] = {}
        self._hotspot_list: list[HotSpot] = []
        self.buffer: str | None = None
        self.line_positions: list[int] | None = None

    @abc.abstractmethod
    def process(self) -> None:
        """Scan the current buffer for hotspots."""

    def reset(self) -> None:
        """Forget all hotspots."""
        self._hotspots.clear()
        self._hotspot_list.clear()

    def set_buffer(self, buffer: str, line_positions: list[int]) -> None:
        """Set the text to scan and the offsets at which its lines start."""
        self.buffer = buffer
        self.line_positions = line_positions

    def add_hot_spot(self, spot: HotSpot) -> None:
        self._hotspot_list.append(spot)
        for line in range(spot.start_line, spot.end_line + 1):
            self._hotspots.setdefault(line, []).append(spot)

    def hot_spot_at(self, line: int, column: int) -> HotSpot | None:
        """Return the hotspot covering a position, the latest added first."""
        for spot in self.hot_spots_at_line(line):
            if spot.start_line == line and spot.start_column > column:
                continue
            if spot.end_line == line and spot.end_column < column:
                continue
            return spot
        return None

    def hot_spots(self) -> list[HotSpot]:
        return list(self._hotspot_list)

    def hot_spots_at_line(self, line: int) -> list[HotSpot]:
        """Hotspots touching a line, most recently added first."""
        return list(reversed(self._hotspots.get(line, ())))

    def line_column(self, position: int) -> tuple[int, int]:
        """Convert a buffer offset to a (line, display column) pair.

        Offsets outside every line give (0, 0).
        """
        if self.buffer is None or self.line_positions is None:
            raise ValueError("no buffer has been set")
        starts = self.line_positions
        nexts = [*starts[1:], len(self.buffer) + 1]
        for line, (start, next_line) in enumerate(zip(starts, nexts)):
            if start <= position < next_line:
                return line, _string_width(self.buffer[start:position])
        return 0, 0


class RegExpHotSpot(HotSpot):
    """Hotspot for a regular expression match; keeps the captured texts."""

    def __init__(self, start_line: int, start_column: int, end_line: int, end_column: int) -> None:
        super().__init__(start_line, start_column, end_line, end_column)
        self.type = HotSpotType.MARKER
        self.captured_texts: list[str] = []

    def activate(self, action: str = "") -> None:
        """Markers have nothing to do when activated."""


class RegExpFilter(Filter):
    """Marks every match of a regular expression.

    A pattern that matches the empty string is treated as matching nothing.
    """

    def __init__(self, pattern: str | re.Pattern[str] = "") -> None:
        super().__init__()
        self.pattern = pattern  # type: ignore[assignment]

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: str | re.Pattern[str]) -> None:
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def process(self) -> None:
        text = self.buffer
        if text is None:
            raise ValueError("no buffer has been set")
        if self._pattern.fullmatch(""):
            return
        pos = 0
        while (match := self._pattern.search(text, pos)) is not None:
            start_line, start_column = self.line_column(match.start())
            end_line, end_column = self.line_column(match.end())
            spot = self.new_hot_spot(start_line, start_column, end_line, end_column)
            spot.captured_texts = [match.group(0), *(g or "" for g in match.groups())]
            self.add_hot_spot(spot)
            if match.end() == match.start():
                break
            pos = match.end()

    def new_hot_spot(
        self, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> RegExpHotSpot:
        """Create the hotspot for a match; subclasses return their own kinds."""
        return RegExpHotSpot(start_line, start_column, end_line, end_column)