"""Range producer and cursor contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Union
import math
import operator

from rangeiter.error_msg import fail

Number = Union[int, float]


@dataclass(frozen=True)
class RangeParameters:
    """Validated, normalized range parameters."""

    start: Number
    end: Number
    increment: Number

    @property
    def total_steps(self) -> float:
        """Number of values in the range, possibly fractional or infinite."""
        return (self.end - self.start) / self.increment

    @property
    def is_infinite(self) -> bool:
        steps = self.total_steps
        return math.isinf(steps) and steps > 0

    @property
    def total_size(self) -> int | None:
        """Count of produced values, or None for an unbounded range."""
        steps = self.total_steps
        if steps <= 0:
            return 0
        if math.isinf(steps):
            return None
        return math.ceil(steps)

    def value_at(self, index: int) -> Number:
        return self.start + index * self.increment


class CursorState(Enum):
    NOT_STARTED = "not_started"
    PRODUCING = "producing"
    EXHAUSTED = "exhausted"


class RangeCursor:
    """Single traversal over a range.

    The step count is captured when the cursor is created and every value is
    computed from the number of steps already taken, so floating point error
    never accumulates across draws. Once exhausted the cursor stays exhausted.
    """

    def __init__(self, parameters: RangeParameters):
        self._parameters = parameters
        self._total_steps = parameters.total_steps
        self._steps_done = 0
        self._state = CursorState.NOT_STARTED

    @property
    def steps_done(self) -> int:
        return self._steps_done

    @property
    def state(self) -> CursorState:
        return self._state

    def has_next(self) -> bool:
        if self._state is CursorState.EXHAUSTED:
            return False
        if self._steps_done >= self._total_steps:
            self._state = CursorState.EXHAUSTED
            return False
        return True

    def __iter__(self) -> RangeCursor:
        return self

    def __next__(self) -> Number:
        if not self.has_next():
            raise StopIteration
        value = self._parameters.value_at(self._steps_done)
        self._steps_done += 1
        if self._steps_done >= self._total_steps:
            self._state = CursorState.EXHAUSTED
        else:
            self._state = CursorState.PRODUCING
        return value

    def __length_hint__(self) -> int:
        total_size = self._parameters.total_size
        if total_size is None:
            return NotImplemented
        return max(0, total_size - self._steps_done)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(steps_done={self._steps_done}, "
            f"state={self._state.value})"
        )


@dataclass
class PageResult:
    """Window of values taken from a range."""

    items: list[Number]
    offset: int
    limit: int
    next_offset: int | None


class RangeSequence:
    """Restartable range producer; every ``iter()`` yields a fresh cursor."""

    def __init__(self, parameters: RangeParameters):
        self._parameters = parameters

    @property
    def parameters(self) -> RangeParameters:
        return self._parameters

    @property
    def start(self) -> Number:
        return self._parameters.start

    @property
    def end(self) -> Number:
        return self._parameters.end

    @property
    def increment(self) -> Number:
        return self._parameters.increment

    @property
    def total_steps(self) -> float:
        return self._parameters.total_steps

    @property
    def total_size(self) -> int | None:
        return self._parameters.total_size

    @property
    def is_infinite(self) -> bool:
        return self._parameters.is_infinite

    def __iter__(self) -> RangeCursor:
        return RangeCursor(self._parameters)

    def iter_values(self) -> Iterator[Number]:
        return iter(self)

    def __getitem__(self, index: Any) -> Number:
        index = operator.index(index)
        total_size = self.total_size
        if index < 0:
            if total_size is None:
                raise IndexError("negative index on an unbounded range")
            index += total_size
        if index < 0 or (total_size is not None and index >= total_size):
            raise IndexError("range index out of range")
        return self._parameters.value_at(index)

    def page(self, offset: int, limit: int) -> PageResult:
        offset = operator.index(offset)
        limit = operator.index(limit)
        if offset < 0:
            fail("offset", offset, "must be non-negative")
        if limit < 0:
            fail("limit", limit, "must be non-negative")

        stop = offset + limit
        total_size = self.total_size
        if total_size is not None:
            stop = min(stop, total_size)

        items = [self._parameters.value_at(index) for index in range(offset, stop)]
        if total_size is not None and stop >= total_size:
            next_offset = None
        else:
            next_offset = stop
        return PageResult(items=items, offset=offset, limit=limit, next_offset=next_offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSequence):
            return NotImplemented
        return self._parameters == other._parameters

    def __hash__(self) -> int:
        return hash(self._parameters)

    def __repr__(self) -> str:
        return "{}({!r}, {!r}, {!r})".format(
            type(self).__name__, self.start, self.end, self.increment
        )
