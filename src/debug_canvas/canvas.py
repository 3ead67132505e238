"""Sparse character canvas for debugging coordinate based data."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .bounds import EMPTY_BOUNDS, Bounds, Coord, to_coord
from .options import Options, check_char


LOGGER = logging.getLogger(__name__)

CharGrid = NDArray[np.object_]


class CellRef:
    """Handle to one written cell, returned by :meth:`DebugCanvas.write`."""

    __slots__ = ("_canvas", "coord")

    def __init__(self, canvas: "DebugCanvas", coord: Coord) -> None:
        self._canvas = canvas
        self.coord = coord

    @property
    def value(self) -> str:
        return self._canvas.get(self.coord)

    @value.setter
    def value(self, char: str) -> None:
        self._canvas._store(self.coord, check_char(char))

    def __repr__(self) -> str:
        return f"CellRef(coord={self.coord!r}, value={self.value!r})"


class DebugCanvas:
    """Unbounded two-dimensional grid of single characters.

    Only written coordinates are stored.  The canvas keeps the tight bounding
    box of those coordinates so it can be rendered as a rectangular block of
    text, with the configured filler shown for every gap.

    Coordinates are ``(row, col)`` pairs.  With the default options larger
    rows are printed first, which suits "y grows upwards" data; pass
    ``Options(bottom_oriented=True)`` for screen style "row 0 at the top"
    output.
    """

    def __init__(self, options: Optional[Options] = None) -> None:
        self._options = options if options is not None else Options()
        self._cells: Dict[Coord, str] = {}
        self._bounds: Bounds = EMPTY_BOUNDS

    @classmethod
    def new(cls) -> "DebugCanvas":
        """Return an empty canvas with default options."""

        return cls()

    @classmethod
    def with_options(cls, options: Options) -> "DebugCanvas":
        """Return an empty canvas using ``options``."""

        return cls(options)

    # Introspection ----------------------------------------------------
    @property
    def options(self) -> Options:
        return self._options

    @property
    def bounds(self) -> Bounds:
        """Tight bounding box of the occupied cells."""

        return self._bounds

    def is_empty(self) -> bool:
        return not self._cells

    def size(self) -> Tuple[int, int]:
        """Return ``(rows, cols)`` of the bounding box, ``(0, 0)`` if empty."""

        if self.is_empty():
            return (0, 0)
        return self._bounds.size()

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: object) -> bool:
        try:
            key = to_coord(coord)
        except (TypeError, OverflowError):
            return False
        return key in self._cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def items(self) -> Iterator[Tuple[Coord, str]]:
        """Yield ``(coord, char)`` for every occupied cell."""

        yield from self._cells.items()

    # Access -----------------------------------------------------------
    def get(self, coord: Coord) -> str:
        """Return the character at ``coord`` or the filler if unoccupied.

        Reading never adds a cell.
        """

        return self._cells.get(to_coord(coord), self._options.filler)

    def write(self, coord: Coord) -> CellRef:
        """Occupy ``coord`` and return a handle for changing its character.

        An unoccupied coordinate is inserted holding the filler until the
        caller assigns ``handle.value``.  It counts as occupied from then on,
        even if it keeps the filler character, and can be removed again.
        """

        key = to_coord(coord)
        if key not in self._cells:
            self._cells[key] = self._options.filler
        self._bounds = self._bounds.widen(*key)
        return CellRef(self, key)

    def set(self, coord: Coord, char: str) -> None:
        """Store ``char`` at ``coord``, occupying it if necessary.

        Raises:
            ValueError: If ``char`` is not a single character.
        """

        check_char(char)
        self.write(coord).value = char

    def _store(self, key: Coord, char: str) -> None:
        # Keeps bounds valid even when a stale CellRef is reused after removal.
        self._cells[key] = char
        self._bounds = self._bounds.widen(*key)

    __getitem__ = get
    __setitem__ = set

    def remove(self, coord: Coord) -> None:
        """Remove the cell at ``coord``; do nothing if it is not occupied.

        The bounding box is rebuilt from the remaining cells, since the removed
        cell may have been the only one on any of the four edges.
        """

        key = to_coord(coord)
        if self._cells.pop(key, None) is None:
            return
        self._bounds = Bounds.from_points(self._cells)
        LOGGER.debug("Removed %s, bounds now %s", key, self._bounds)

    __delitem__ = remove

    def clear(self) -> None:
        """Drop every cell, keeping the options."""

        self._cells.clear()
        self._bounds = EMPTY_BOUNDS
        LOGGER.debug("Canvas cleared")

    def copy(self) -> "DebugCanvas":
        """Return an independent canvas with the same options and cells."""

        other = type(self)(self._options)
        other._cells = dict(self._cells)
        other._bounds = self._bounds
        return other

    # Rendering --------------------------------------------------------
    def to_array(self) -> CharGrid:
        """Return the bounding box as a dense ``(rows, cols)`` character array.

        Rows are in render order, so ``grid[0]`` is the first printed line.
        Every entry equals what :meth:`get` returns for that position.
        """

        rows, cols = self.size()
        # Object dtype keeps every character intact; "<U1" drops NUL.
        grid = np.full((rows, cols), self._options.filler, dtype=object)
        if self.is_empty():
            return grid
        box = self._bounds
        for (row, col), char in self._cells.items():
            if self._options.bottom_oriented:
                line = row - box.min_row
            else:
                line = box.max_row - row
            grid[line, col - box.min_col] = char
        return grid

    def render(self) -> str:
        """Return the canvas as text, one line per row, without a final newline.

        An empty canvas renders as ``""``.
        """

        if self.is_empty():
            return ""
        return "\n".join("".join(line) for line in self.to_array())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(options={self._options!r}, "
            f"cells={len(self._cells)}, bounds={self._bounds!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DebugCanvas):
            return NotImplemented
        return self._options == other._options and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]


__all__ = ["CellRef", "CharGrid", "DebugCanvas"]
