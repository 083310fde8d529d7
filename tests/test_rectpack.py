import itertools

import pytest

from questkit.rectpack import MAX_VALUE, Heuristic, Rect, RectPacker


def _overlaps(a: Rect, b: Rect) -> bool:
    return a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h


def _assert_valid_layout(rects, width, height):
    placed = [r for r in rects if r.was_packed and r.w and r.h]
    for r in placed:
        assert 0 <= r.x and r.x + r.w <= width
        assert 0 <= r.y and r.y + r.h <= height
    for a, b in itertools.combinations(placed, 2):
        assert not _overlaps(a, b)


def _sample_rects():
    sizes = [(3, 7), (5, 2), (4, 4), (1, 9), (6, 3), (2, 2), (7, 1), (3, 3)]
    return [Rect(w, h, id=i) for i, (w, h) in enumerate(sizes)]


@pytest.mark.parametrize(
    "heuristic", [Heuristic.SKYLINE_BL_SORT_HEIGHT, Heuristic.SKYLINE_BF_SORT_HEIGHT]
)
def test_sample_packs_without_overlap(heuristic):
    packer = RectPacker(16, 16, 16)
    packer.set_heuristic(heuristic)
    rects = _sample_rects()
    assert packer.pack(rects) is True
    assert all(r.was_packed for r in rects)
    _assert_valid_layout(rects, 16, 16)


def test_original_order_is_preserved():
    rects = _sample_rects()
    RectPacker(16, 16, 16).pack(rects)
    assert [r.id for r in rects] == list(range(len(rects)))


def test_four_quarters_fill_square():
    rects = [Rect(5, 5, id=i) for i in range(4)]
    assert RectPacker(10, 10, 10).pack(rects) is True
    _assert_valid_layout(rects, 10, 10)
    assert sum(r.w * r.h for r in rects) == 10 * 10


def test_too_wide_rect_is_not_packed():
    rects = [Rect(11, 2)]
    assert RectPacker(10, 10, 10).pack(rects) is False
    assert rects[0].was_packed is False
    assert (rects[0].x, rects[0].y) == (MAX_VALUE, MAX_VALUE)


def test_too_tall_rect_is_not_packed():
    rects = [Rect(2, 11), Rect(2, 2)]
    assert RectPacker(10, 10, 10).pack(rects) is False
    assert rects[0].was_packed is False
    assert rects[1].was_packed is True


def test_empty_rect_needs_no_space():
    rects = [Rect(0, 5), Rect(4, 0)]
    assert RectPacker(1, 1, 1).pack(rects) is True
    assert all((r.x, r.y) == (0, 0) for r in rects)


def test_overflow_leaves_rest_unpacked():
    rects = [Rect(4, 4, id=i) for i in range(5)]
    assert RectPacker(8, 8, 8).pack(rects) is False
    assert sum(r.was_packed for r in rects) == 4
    _assert_valid_layout(rects, 8, 8)


def test_out_of_memory_fails_when_allowed():
    packer = RectPacker(10, 10, 1)
    packer.set_allow_out_of_mem(True)
    rects = [Rect(1, 1, id=0), Rect(1, 1, id=1)]
    assert packer.pack(rects) is False
    assert sum(r.was_packed for r in rects) == 1


def test_second_call_continues_same_target():
    packer = RectPacker(12, 12, 12)
    first = [Rect(6, 6), Rect(6, 6)]
    second = [Rect(6, 6), Rect(6, 6)]
    assert packer.pack(first) is True
    assert packer.pack(second) is True
    _assert_valid_layout(first + second, 12, 12)
    assert packer.pack([Rect(1, 1)]) is False


def test_invalid_heuristic_raises():
    packer = RectPacker(4, 4, 4)
    with pytest.raises(ValueError):
        packer.set_heuristic(7)


def test_zero_nodes_rejected():
    with pytest.raises(ValueError):
        RectPacker(4, 4, 0)