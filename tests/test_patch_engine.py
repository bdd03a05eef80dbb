"""Tests for the offset-mapping patch engine."""

import pytest

from assuo.core.document.models import Direction
from assuo.core.errors import OutOfBounds, Underflow
from assuo.core.patch.engine import OffsetMap, PatchEngine
from assuo.core.patch.schema import ResolvedDocument, ResolvedInsert, ResolvedRemove


def insert(spot, way, data):
    return ResolvedInsert(way=way, spot=spot, data=data)


def remove(spot, way, count):
    return ResolvedRemove(way=way, spot=spot, count=count)


def apply(base, *edits):
    return PatchEngine().apply(base, list(edits))


@pytest.mark.parametrize("base", [b"", b"x", b"Hello!", bytes(range(256))])
def test_no_edits_returns_base(base: bytes) -> None:
    assert apply(base) == base


def test_insert_after_hello_world() -> None:
    assert apply(b"Hello!", insert(4, Direction.AFTER, b", World")) == b"Hello, World!"


def test_single_insert_matches_slicing() -> None:
    base = b"abcdef"
    for spot in range(len(base)):
        assert apply(base, insert(spot, Direction.AFTER, b"XY")) == base[:spot + 1] + b"XY" + base[spot + 1:]
        assert apply(base, insert(spot, Direction.BEFORE, b"XY")) == base[:spot] + b"XY" + base[spot:]


def test_single_remove_matches_slicing() -> None:
    base = b"abcdefgh"
    assert apply(base, remove(2, Direction.AFTER, 3)) == base[:3] + base[6:]
    assert apply(base, remove(5, Direction.BEFORE, 3)) == base[:2] + base[5:]


def test_remove_after_then_insert_into_removed_spot() -> None:
    result = apply(
        b"abcdef",
        remove(2, Direction.AFTER, 2),
        insert(3, Direction.BEFORE, bytes([88])),
    )
    assert result == b"abcXf"


def test_removed_spots_resolve_to_following_boundary() -> None:
    first = remove(2, Direction.AFTER, 2)
    results = {
        apply(b"abcdef", first, insert(spot, Direction.BEFORE, b"X"))
        for spot in (3, 4, 5)
    }
    assert results == {b"abcXf"}


def test_removal_at_tail_merges_into_end_boundary() -> None:
    first = remove(3, Direction.AFTER, 2)
    assert apply(b"abcdef", first) == b"abcd"
    assert apply(b"abcdef", first, insert(5, Direction.BEFORE, b"!")) == b"abcd!"
    assert apply(b"abcdef", first, insert(4, Direction.AFTER, b"!")) == b"abcd!"


def test_spots_keep_original_frame_after_inserts() -> None:
    result = apply(
        b"ab",
        insert(0, Direction.AFTER, b"XYZ"),
        insert(0, Direction.AFTER, b"Q"),
        insert(1, Direction.BEFORE, b"-"),
    )
    assert result == b"aQXYZ-b"


def test_chained_removals_merge_groups() -> None:
    result = apply(
        b"abcdefgh",
        remove(1, Direction.AFTER, 3),
        remove(4, Direction.BEFORE, 1),
        insert(1, Direction.AFTER, b"X"),
    )
    assert result == b"afXgh"


def test_zero_count_remove_is_noop() -> None:
    assert apply(b"abc", remove(1, Direction.AFTER, 0)) == b"abc"
    assert apply(b"abc", remove(0, Direction.BEFORE, 0)) == b"abc"


@pytest.mark.parametrize("spot", [-1, 6, 100])
def test_invalid_spot_is_out_of_bounds(spot: int) -> None:
    with pytest.raises(OutOfBounds) as excinfo:
        apply(b"abcdef", insert(spot, Direction.AFTER, b"X"))
    assert excinfo.value.spot == spot
    assert excinfo.value.edit_index == 0


def test_error_reports_failing_edit_index() -> None:
    with pytest.raises(OutOfBounds) as excinfo:
        apply(b"abc", insert(0, Direction.AFTER, b"X"), remove(9, Direction.AFTER, 1))
    assert excinfo.value.edit_index == 1
    assert "patch #1" in str(excinfo.value)


def test_remove_before_underflow() -> None:
    with pytest.raises(Underflow) as excinfo:
        apply(b"abc", remove(1, Direction.BEFORE, 2))
    assert excinfo.value.count == 2
    assert excinfo.value.spot == 1


def test_remove_after_past_end_is_out_of_bounds() -> None:
    with pytest.raises(OutOfBounds):
        apply(b"abc", remove(1, Direction.AFTER, 5))


def test_apply_document() -> None:
    document = ResolvedDocument(base=b"Hello!", edits=[insert(4, Direction.AFTER, b", World")])
    assert PatchEngine().apply_document(document) == b"Hello, World!"


def test_offset_map_tracks_buffer_length() -> None:
    offsets = OffsetMap(3)
    assert len(offsets) == 3
    offsets.insert(1, 2)
    assert len(offsets) == 5
    assert offsets.locate(1) == 3
    offsets.remove(0, 2)
    assert len(offsets) == 3
    assert offsets.locate(0) == 0
    assert offsets.locate(2) == 2


def test_offset_map_inserted_positions_are_unaddressable() -> None:
    offsets = OffsetMap(2)
    offsets.insert(1, 4)
    assert [offsets.locate(spot) for spot in (0, 1)] == [0, 5]
    with pytest.raises(OutOfBounds):
        offsets.locate(2)
