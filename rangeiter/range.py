"""
Range generator for rangeiter

Builds lazy, restartable numeric ranges over [start, end). Increments may be
fractional and ranges may run towards infinity in either direction.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Optional
import logging
import math

from rangeiter.error_msg import fail
from rangeiter.sequence import Number, RangeParameters, RangeSequence

logger = logging.getLogger(__name__)


def _as_number(value: Any, *, name: str) -> Number:
    if isinstance(value, bool) or not isinstance(value, Real):
        fail(name, value, "must be a number")
    try:
        as_float = float(value)
    except OverflowError:
        fail(name, value, "is too large to represent")
    if math.isnan(as_float):
        fail(name, value, "must not be NaN")
    return value


def make_range(
    start: Optional[Number] = None,
    end: Optional[Number] = None,
    increment: Number = 1,
) -> RangeSequence:
    """
    Return a lazy range over [start, end)

    If only one number is given the range is [0, start). When that number is
    negative the increment is reversed, so ``make_range(-5)`` counts down
    from 0. With an explicit end no reversal happens: ``make_range(0, -5)``
    is empty.

    Args:
        start: Inclusive start; the exclusive end when ``end`` is omitted
        end: Exclusive end, may be infinite
        increment: Step between values, finite and non-zero

    Returns:
        RangeSequence whose every iteration starts from the beginning

    Raises:
        InvalidArgument: If any parameter fails validation
    """
    if start is None:
        fail("start", start, "must be given as a number")
    start = _as_number(start, name="start")

    implicit = end is None
    if implicit:
        start, end = 0, start
    else:
        end = _as_number(end, name="end")
        if math.isinf(start):
            fail("start", start, "must be finite when end is given")

    increment = _as_number(increment, name="increment")
    if increment == 0:
        fail("increment", increment, "must not be 0")
    if math.isinf(increment):
        fail("increment", increment, "must not be infinite")

    if implicit and end < 0:
        increment = -increment

    parameters = RangeParameters(start=start, end=end, increment=increment)
    try:
        total_size = parameters.total_size
    except OverflowError:
        fail("end", end, "is too far from start to count steps")
    logger.debug(
        "range start=%r end=%r increment=%r total_size=%r",
        start,
        end,
        increment,
        total_size,
    )
    return RangeSequence(parameters)
