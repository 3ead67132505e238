"""Rendering configuration for :class:`~debug_canvas.canvas.DebugCanvas`."""

from __future__ import annotations

from dataclasses import dataclass


# Character shown for in-bounds positions that hold no cell.
DEFAULT_FILLER = " "


def check_char(value: object, what: str = "cell value") -> str:
    """Return ``value`` if it is a single character string.

    Raises:
        ValueError: If ``value`` is not a ``str`` of length one.
    """

    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


@dataclass(frozen=True)
class Options:
    """Options controlling how a canvas is rendered.

    Parameters
    ----------
    bottom_oriented:
        When ``True`` the smallest row is printed first, so row values grow
        downwards.  The default prints the largest row first.
    filler:
        Character used for empty positions inside the bounding box.
    """

    bottom_oriented: bool = False
    filler: str = DEFAULT_FILLER

    def __post_init__(self) -> None:
        check_char(self.filler, "filler")


__all__ = ["DEFAULT_FILLER", "Options", "check_char"]
