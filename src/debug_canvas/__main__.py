"""Small ASCII demo for the debug canvas.

Run with: `python -m debug_canvas`

Builds a canvas one step at a time and prints every frame, which doubles as
a quick smoke test of rendering, orientation and removal.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from . import DebugCanvas, Options


LOGGER = logging.getLogger(__name__)

# (description, action, coordinate, character)
DEMO_STEPS: List[Tuple[str, str, Tuple[int, int], str]] = [
    ("write (3, 2) = '#'", "set", (3, 2), "#"),
    ("overwrite (3, 2) = '.'", "set", (3, 2), "."),
    ("write (3, 3) = '-'", "set", (3, 3), "-"),
    ("write (2, 3) = 'a'", "set", (2, 3), "a"),
    ("write (2, 5) = 'b'", "set", (2, 5), "b"),
    ("remove (2, 5)", "remove", (2, 5), ""),
    ("remove (2, 8)", "remove", (2, 8), ""),
]


def run_demo(canvas: DebugCanvas) -> List[str]:
    """Apply :data:`DEMO_STEPS` to ``canvas`` and return each rendered frame."""

    frames = [canvas.render()]
    for description, action, coord, char in DEMO_STEPS:
        if action == "set":
            canvas[coord] = char
        else:
            canvas.remove(coord)
        LOGGER.info("%s -> size %s", description, canvas.size())
        frames.append(canvas.render())
    return frames


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--bottom-oriented",
        action="store_true",
        help="Print the smallest row first instead of the largest.",
    )
    parser.add_argument(
        "--filler",
        default=" ",
        help="Character shown for empty positions (default: space).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(message)s",
    )
    try:
        options = Options(bottom_oriented=args.bottom_oriented, filler=args.filler)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 2
    for index, frame in enumerate(run_demo(DebugCanvas(options))):
        print(f"--- frame {index}")
        if frame:
            print(frame)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
