"""Convenience helpers built on :class:`~debug_canvas.canvas.DebugCanvas`."""

from __future__ import annotations

from typing import Mapping, Optional

from .bounds import Coord, to_coord
from .canvas import DebugCanvas
from .options import Options


def canvas_from_text(
    text: str, options: Optional[Options] = None, origin: Coord = (0, 0)
) -> DebugCanvas:
    """Build a canvas from a rendered block of text.

    ``origin`` is the coordinate of the first character of the first line.
    Following lines step down one row with the default options and up one row
    when ``options.bottom_oriented`` is set, mirroring :meth:`DebugCanvas.render`.
    Characters equal to the filler are left unoccupied.
    """

    canvas = DebugCanvas(options)
    filler = canvas.options.filler
    step = 1 if canvas.options.bottom_oriented else -1
    top, left = to_coord(origin)
    for i, line in enumerate(text.split("\n")):
        for j, char in enumerate(line):
            if char != filler:
                canvas[top + step * i, left + j] = char
    return canvas


def overlay(canvas: DebugCanvas, points: Mapping[Coord, str]) -> DebugCanvas:
    """Return a copy of ``canvas`` with ``points`` drawn on top.

    Useful for showing a moving marker (a path head, an agent) over a static
    board without touching the board itself.
    """

    result = canvas.copy()
    for coord, char in points.items():
        result[coord] = char
    return result


__all__ = ["canvas_from_text", "overlay"]
