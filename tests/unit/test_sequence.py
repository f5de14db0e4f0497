from __future__ import annotations

import operator

import pytest

from rangeiter import (
    CursorState,
    InvalidArgument,
    PageResult,
    RangeCursor,
    RangeParameters,
    RangeSequence,
    make_range,
)


@pytest.mark.unit
def test_cursor_state_machine():
    cursor = iter(make_range(2))
    assert isinstance(cursor, RangeCursor)
    assert cursor.state is CursorState.NOT_STARTED
    assert cursor.has_next()

    assert next(cursor) == 0
    assert cursor.state is CursorState.PRODUCING
    assert cursor.steps_done == 1

    assert next(cursor) == 1
    assert cursor.state is CursorState.EXHAUSTED
    assert not cursor.has_next()

    with pytest.raises(StopIteration):
        next(cursor)
    with pytest.raises(StopIteration):
        next(cursor)
    assert cursor.state is CursorState.EXHAUSTED
    assert cursor.steps_done == 2


@pytest.mark.unit
def test_empty_cursor_goes_straight_to_exhausted():
    cursor = iter(make_range(0, -5))
    assert cursor.state is CursorState.NOT_STARTED
    assert not cursor.has_next()
    assert cursor.state is CursorState.EXHAUSTED
    assert list(cursor) == []


@pytest.mark.unit
def test_cursors_are_independent():
    sequence = make_range(4)
    first = iter(sequence)
    assert [next(first), next(first)] == [0, 1]

    second = iter(sequence)
    assert second is not first
    assert second.state is CursorState.NOT_STARTED
    assert list(second) == [0, 1, 2, 3]
    assert list(first) == [2, 3]
    assert list(sequence.iter_values()) == [0, 1, 2, 3]


@pytest.mark.unit
def test_cursor_iterates_itself():
    cursor = iter(make_range(3))
    assert iter(cursor) is cursor


@pytest.mark.unit
def test_cursor_length_hint():
    cursor = iter(make_range(5))
    assert operator.length_hint(cursor) == 5
    next(cursor)
    assert operator.length_hint(cursor) == 4
    assert operator.length_hint(iter(make_range(0, -5))) == 0
    assert operator.length_hint(iter(make_range(float("inf"))), 7) == 7


@pytest.mark.unit
def test_parameters_are_immutable():
    parameters = make_range(0, 5, 2).parameters
    assert parameters == RangeParameters(start=0, end=5, increment=2)
    assert parameters.total_steps == 2.5
    assert parameters.total_size == 3
    with pytest.raises(AttributeError):
        parameters.start = 1  # type: ignore[misc]


@pytest.mark.unit
def test_normalized_properties():
    sequence = make_range(-5)
    assert (sequence.start, sequence.end, sequence.increment) == (0, -5, -1)
    assert sequence.total_steps == 5
    assert sequence.total_size == 5
    assert not sequence.is_infinite

    empty = make_range(0, -5)
    assert empty.total_steps == -5
    assert empty.total_size == 0


@pytest.mark.unit
def test_index_access():
    sequence = make_range(0, 10, 3)
    assert [sequence[i] for i in range(4)] == [0, 3, 6, 9]
    assert sequence[-1] == 9
    assert sequence[-4] == 0
    with pytest.raises(IndexError):
        sequence[4]
    with pytest.raises(IndexError):
        sequence[-5]
    with pytest.raises(TypeError):
        sequence[1.5]


@pytest.mark.unit
def test_index_access_on_unbounded_range():
    sequence = make_range(float("inf"))
    assert sequence[10**6] == 10**6
    with pytest.raises(IndexError):
        sequence[-1]


@pytest.mark.unit
def test_page_bounded():
    sequence = make_range(10)
    assert sequence.page(0, 4) == PageResult(items=[0, 1, 2, 3], offset=0, limit=4, next_offset=4)
    assert sequence.page(8, 4) == PageResult(items=[8, 9], offset=8, limit=4, next_offset=None)
    assert sequence.page(12, 3).items == []
    assert sequence.page(12, 3).next_offset is None


@pytest.mark.unit
def test_page_unbounded():
    page = make_range(0, float("inf"), 2).page(5, 3)
    assert page.items == [10, 12, 14]
    assert page.next_offset == 8


@pytest.mark.unit
def test_page_rejects_negative_window():
    sequence = make_range(10)
    with pytest.raises(InvalidArgument) as excinfo:
        sequence.page(-1, 2)
    assert excinfo.value.parameter == "offset"
    with pytest.raises(InvalidArgument) as excinfo:
        sequence.page(0, -2)
    assert excinfo.value.parameter == "limit"


@pytest.mark.unit
def test_equality_hash_and_repr():
    assert make_range(5) == make_range(0, 5, 1)
    assert hash(make_range(5)) == hash(make_range(0, 5, 1))
    assert make_range(-5) == make_range(0, -5, -1)
    assert make_range(5) != make_range(0, 5, 2)
    assert repr(make_range(5)) == "RangeSequence(0, 5, 1)"
    assert isinstance(make_range(5), RangeSequence)


@pytest.mark.unit
@pytest.mark.parametrize("offset, limit", [(0.5, 2), (0, 2.0), ("1", 2)])
def test_page_rejects_non_integer_window(offset, limit):
    with pytest.raises(TypeError):
        make_range(10).page(offset, limit)
