"""Regular-expression search through terminal output and history."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

# History is read in blocks of at most this many lines.
_BLOCK_LINES = 10000


class HistorySource(Protocol):
    """Anything holding lines of terminal text, history included."""

    def line_count(self) -> int:
        """Total number of lines."""

    def lines(self, start_line: int, end_line: int) -> Sequence[str]:
        """Plain text of the lines from ``start_line`` to ``end_line`` inclusive."""


@dataclass(frozen=True)
class SearchMatch:
    """Where a match starts and ends; the end column is inclusive."""

    start_column: int
    start_line: int
    end_column: int
    end_line: int


def find_line_number(line_positions: Sequence[int], position: int) -> int:
    """Return the line whose start offset is the last one not after ``position``."""
    line = 0
    while line + 1 < len(line_positions) and line_positions[line + 1] <= position:
        line += 1
    return line


class HistorySearch:
    """Finds the next or previous match of a pattern, wrapping around the ends."""

    def __init__(
        self,
        source: HistorySource,
        pattern: str | re.Pattern[str],
        forwards: bool = True,
        start_column: int = 0,
        start_line: int = 0,
    ) -> None:
        self.source = source
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.forwards = forwards
        self.start_column = start_column
        self.start_line = start_line

    def search(self) -> SearchMatch | None:
        """Return the match found, or None; an empty pattern finds nothing."""
        if not self.pattern.pattern:
            return None
        total = self.source.line_count()
        after = (self.start_column, self.start_line, -1, total)
        before = (0, 0, self.start_column, self.start_line)
        first, second = (after, before) if self.forwards else (before, after)
        return self._search_range(*first) or self._search_range(*second)

    def _read(self, first: int, last: int) -> tuple[str, list[int]]:
        last = min(last, self.source.line_count() - 1)
        lines = list(self.source.lines(first, last)) if first <= last else []
        positions: list[int] = []
        length = 0
        for line in lines:
            positions.append(length)
            length += len(line) + 1
        positions.append(length)
        return "".join(line + "\n" for line in lines), positions

    def _match_start(self, text: str, start_column: int, end_position: int) -> int | None:
        if self.forwards:
            match = self.pattern.search(text, start_column)
            if match is None or match.start() >= end_position:
                return None
            return match.start()
        for position in range(min(end_position - 1, len(text)), start_column - 1, -1):
            if self.pattern.match(text, position):
                return position
        return None

    def _search_range(
        self, start_column: int, start_line: int, end_column: int, end_line: int
    ) -> SearchMatch | None:
        logger.debug(
            "search from %d,%d to %d,%d", start_column, start_line, end_column, end_line
        )
        lines_read = 0
        lines_to_read = end_line - start_line + 1
        while (block := min(_BLOCK_LINES, lines_to_read - lines_read)) > 0:
            if self.forwards:
                block_start = start_line + lines_read
            else:
                block_start = end_line - lines_read - block + 1
            text, positions = self._read(block_start, block_start + block - 1)

            # The text ends in a newline; the empty line after it is ignored.
            line_total = len(positions) - 1
            if line_total > 0 and end_column > -1:
                end_position = positions[line_total - 1] + end_column
            else:
                end_position = len(text)

            match_start = self._match_start(text, start_column, end_position)
            if match_start is not None:
                match = self.pattern.match(text, match_start)
                assert match is not None
                match_end = match_start + (match.end() - match.start()) - 1
                start_in_text = find_line_number(positions, match_start)
                end_in_text = find_line_number(positions, match_end)
                return SearchMatch(
                    start_column=match_start - positions[start_in_text],
                    start_line=start_in_text + block_start,
                    end_column=match_end - positions[end_in_text],
                    end_line=end_in_text + block_start,
                )
            lines_read += block
        logger.debug("not found")
        return None