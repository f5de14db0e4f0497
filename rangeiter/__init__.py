"""Lazy, restartable numeric ranges with fractional and unbounded steps."""

from rangeiter.error_msg import InvalidArgument, RangeIterError
from rangeiter.range import make_range
from rangeiter.sequence import (
    CursorState,
    PageResult,
    RangeCursor,
    RangeParameters,
    RangeSequence,
)
from rangeiter.version import __version__, get_version

__all__ = [
    "CursorState",
    "InvalidArgument",
    "PageResult",
    "RangeCursor",
    "RangeIterError",
    "RangeParameters",
    "RangeSequence",
    "__version__",
    "get_version",
    "make_range",
]
