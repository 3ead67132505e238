import pytest

from debug_canvas.bounds import EMPTY_BOUNDS, INT64_MAX, INT64_MIN, Bounds, to_coord


def test_empty_sentinel() -> None:
    assert EMPTY_BOUNDS.is_empty
    assert EMPTY_BOUNDS.size() == (0, 0)
    assert not EMPTY_BOUNDS.contains(0, 0)
    assert Bounds.from_points([]) == EMPTY_BOUNDS


def test_widen_from_empty_is_single_cell() -> None:
    box = EMPTY_BOUNDS.widen(4, -2)
    assert box == Bounds(4, 4, -2, -2)
    assert box.size() == (1, 1)
    assert not box.is_empty


def test_widen_axes_are_independent() -> None:
    box = Bounds(0, 2, 0, 2).widen(1, 10)
    assert box == Bounds(0, 2, 0, 10)
    box = box.widen(-5, 1)
    assert box == Bounds(-5, 2, 0, 10)


def test_from_points_is_tight() -> None:
    box = Bounds.from_points([(1, 5), (-3, 2), (0, 9)])
    assert box == Bounds(-3, 1, 2, 9)
    assert box.size() == (5, 8)
    assert box.contains(0, 2)
    assert not box.contains(2, 2)


def test_to_coord_conversion() -> None:
    assert to_coord((True, 3)) == (1, 3)
    assert to_coord([INT64_MIN, INT64_MAX]) == (INT64_MIN, INT64_MAX)
    with pytest.raises(TypeError):
        to_coord(5)
    with pytest.raises(TypeError):
        to_coord(("1", 2))
    with pytest.raises(OverflowError):
        to_coord((0, INT64_MIN - 1))
