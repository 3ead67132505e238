"""Bounding box bookkeeping and coordinate conversion."""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

Coord = Tuple[int, int]

# Coordinates are limited to the signed 64-bit range.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _to_int64(value: object) -> int:
    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(
            f"coordinate components must be integers, got {type(value).__name__}"
        ) from None
    if not INT64_MIN <= number <= INT64_MAX:
        raise OverflowError(f"coordinate component {number} outside the int64 range")
    return number


def to_coord(coord: object) -> Coord:
    """Convert a ``(row, col)`` pair to plain Python integers.

    Any integer-like component (``int``, numpy integer scalars, anything with
    ``__index__``) is accepted.  Floats and strings are rejected rather than
    truncated.

    Raises:
        TypeError: If ``coord`` is not a pair of integer-like values.
        OverflowError: If a component does not fit in a signed 64-bit integer.
    """

    try:
        row, col = coord  # type: ignore[misc]
    except (TypeError, ValueError):
        raise TypeError(f"expected a (row, col) pair, got {coord!r}") from None
    return _to_int64(row), _to_int64(col)


@dataclass(frozen=True)
class Bounds:
    """Inclusive axis-aligned box ``(min_row, max_row, min_col, max_col)``.

    An empty box has ``min > max`` on both axes; see :data:`EMPTY_BOUNDS`.
    """

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def is_empty(self) -> bool:
        return self.min_row > self.max_row or self.min_col > self.max_col

    def size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` covered by the box, ``(0, 0)`` if empty."""

        if self.is_empty:
            return (0, 0)
        return (
            self.max_row - self.min_row + 1,
            self.max_col - self.min_col + 1,
        )

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col

    def widen(self, row: int, col: int) -> "Bounds":
        """Return a box grown just enough to include ``(row, col)``.

        Each axis is updated on its own; growing one never shrinks the other.
        """

        return replace(
            self,
            min_row=min(self.min_row, row),
            max_row=max(self.max_row, row),
            min_col=min(self.min_col, col),
            max_col=max(self.max_col, col),
        )

    @classmethod
    def from_points(cls, points: Iterable[Coord]) -> "Bounds":
        """Return the tight box around ``points`` (empty if there are none)."""

        box = EMPTY_BOUNDS
        for row, col in points:
            box = box.widen(row, col)
        return box


# Sentinel for a canvas without cells.  Extremes of the int64 range make
# ``widen`` work on it directly.
EMPTY_BOUNDS = Bounds(
    min_row=INT64_MAX,
    max_row=INT64_MIN,
    min_col=INT64_MAX,
    max_col=INT64_MIN,
)


__all__ = ["Bounds", "Coord", "EMPTY_BOUNDS", "INT64_MAX", "INT64_MIN", "to_coord"]
