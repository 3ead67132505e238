import logging

from debug_canvas import DebugCanvas
from debug_canvas.__main__ import main, run_demo


def test_run_demo_frames() -> None:
    frames = run_demo(DebugCanvas())
    assert frames == ["", "#", ".", ".-", ".-\n a", ".-  \n a b", ".-\n a", ".-\n a"]


def test_main_prints_frames(capsys) -> None:
    assert main(["--filler", "_", "--bottom-oriented"]) == 0
    out = capsys.readouterr().out
    assert "--- frame 7" in out
    assert "_a_b" in out
    assert out.rstrip().endswith("_a\n.-")


def test_main_rejects_long_filler(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="debug_canvas.__main__"):
        assert main(["--filler", "ab"]) == 2
    assert "filler" in caplog.text
