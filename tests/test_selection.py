import pytest

from goed.core.selection import Selection, Slice


def test_selection_in_order_unchanged():
    s = Selection(1, 2, 3, 4)
    assert (s.line_from, s.col_from, s.line_to, s.col_to) == (1, 2, 3, 4)


def test_selection_reversed_lines_swapped():
    s = Selection(7, 5, 2, 9)
    assert (s.line_from, s.col_from, s.line_to, s.col_to) == (2, 9, 7, 5)


def test_selection_same_line_reversed_cols():
    s = Selection(2, 8, 2, 4)
    assert (s.col_from, s.col_to) == (4, 8)
    assert s.line_from == s.line_to == 2


def test_selection_whole_lines_not_swapped():
    s = Selection(2, 8, 2, -1)
    assert (s.col_from, s.col_to) == (8, -1)


def test_selection_open_ended_not_swapped():
    s = Selection(5, 1, -1, -1)
    assert (s.line_from, s.line_to) == (5, -1)


def test_selection_str():
    assert str(Selection(1, 2, 3, 4)) == "1 2 3 4"
    assert str(Selection(3, 4, 1, 2)) == "1 2 3 4"


@pytest.mark.parametrize("args", [(1, 2, 3, 4), (9, 1, 2, 3), (4, 6, 4, 1), (3, 3, -1, 0)])
def test_selection_normalize_idempotent(args):
    s = Selection(*args)
    before = str(s)
    s.normalize()
    assert str(s) == before


def test_slice_normalizes_bounds():
    sl = Slice(5, 7, 2, 3)
    assert (sl.r1, sl.c1, sl.r2, sl.c2) == (2, 3, 5, 7)


def test_slice_unbounded_not_swapped():
    sl = Slice(5, 7, -1, -1)
    assert (sl.r1, sl.c1, sl.r2, sl.c2) == (5, 7, -1, -1)


def test_slice_keeps_text():
    rows = [["a", "b"], ["c"]]
    sl = Slice(0, 0, 1, 2, rows)
    assert sl.text == rows


def test_empty_slice_contains_nothing():
    sl = Slice(0, 0, 0, 0)
    assert not sl.contains_line(0)


def test_slice_contains_line_bounds():
    sl = Slice(2, 0, 4, 10)
    assert sl.contains_line(2)
    assert sl.contains_line(3)
    assert sl.contains_line(4)
    assert not sl.contains_line(1)
    assert not sl.contains_line(5)