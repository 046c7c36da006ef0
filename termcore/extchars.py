"""A table of combined character sequences addressed by 16-bit keys."""

from __future__ import annotations

from collections.abc import Sequence

_KEY_MASK = 0xFFFF


def _check_points(points: Sequence[int]) -> tuple[int, ...]:
    points = tuple(points)
    for point in points:
        if not 0 <= point <= _KEY_MASK:
            raise ValueError(f"code point out of 16-bit range: {point}")
    if len(points) > _KEY_MASK:
        raise ValueError(f"sequence of {len(points)} code points is too long")
    return points


def extended_char_hash(points: Sequence[int]) -> int:
    """Return the 16-bit hash of a sequence of code points."""
    key = 0
    for point in _check_points(points):
        key = (31 * key + point) & _KEY_MASK
    return key


class ExtendedCharTable:
    """Maps sequences of code points, such as a base character with
    combining marks, to 16-bit keys that fit in a single cell.

    A key is the hash of its sequence; when that key is taken by a
    different sequence, the following keys are tried in turn.
    """

    def __init__(self) -> None:
        self._table: dict[int, tuple[int, ...]] = {}

    def create_extended_char(self, points: Sequence[int]) -> int:
        """Return the key of ``points``, adding the sequence if it is new."""
        points = _check_points(points)
        key = extended_char_hash(points)
        while key in self._table:
            if self._table[key] == points:
                return key
            key = (key + 1) & _KEY_MASK
        self._table[key] = points
        return key

    def lookup_extended_char(self, key: int) -> tuple[int, ...]:
        """Return the sequence stored under ``key``, or an empty tuple."""
        return self._table.get(key, ())

    def matches(self, key: int, points: Sequence[int]) -> bool:
        """True if ``key`` holds exactly the sequence ``points``."""
        stored = self._table.get(key)
        return stored is not None and stored == tuple(points)

    def __len__(self) -> int:
        return len(self._table)