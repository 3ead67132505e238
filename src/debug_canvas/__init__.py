"""Sparse character canvas for printing coordinate based debug output."""

from .options import DEFAULT_FILLER, Options
from .bounds import EMPTY_BOUNDS, Bounds, to_coord
from .canvas import CellRef, DebugCanvas
from .utils import canvas_from_text, overlay

__all__ = [
    "Bounds",
    "CellRef",
    "DebugCanvas",
    "DEFAULT_FILLER",
    "EMPTY_BOUNDS",
    "Options",
    "canvas_from_text",
    "overlay",
    "to_coord",
]
