from __future__ import annotations

import pytest

from debug_canvas import DebugCanvas, Options, canvas_from_text, overlay


def test_canvas_from_text_round_trips_render() -> None:
    text = ".-  \n a b"
    canvas = canvas_from_text(text, origin=(3, 2))
    assert canvas[3, 2] == "."
    assert canvas[2, 5] == "b"
    assert len(canvas) == 4
    assert canvas.render() == text


def test_canvas_from_text_bottom_oriented() -> None:
    options = Options(bottom_oriented=True, filler=".")
    canvas = canvas_from_text("#..\n..#", options)
    assert canvas[0, 0] == "#"
    assert canvas[1, 2] == "#"
    assert canvas.render() == "#..\n..#"


def test_overlay_leaves_original_untouched() -> None:
    board = DebugCanvas(Options(filler="."))
    board[0, 0] = "#"
    board[0, 2] = "#"
    marked = overlay(board, {(0, 1): "@", (1, 1): "^"})
    assert marked.render() == ".^.\n#@#"
    assert board.render() == "#.#"


def test_overlay_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        overlay(DebugCanvas(), {(0, 0): "xy"})
