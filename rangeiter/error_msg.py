"""
rangeiter error module
"""

from typing import Any, NoReturn


class RangeIterError(Exception):
    """Base class for rangeiter errors"""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(self.format_message())

    def format_message(self) -> str:
        return self.msg


class InvalidArgument(RangeIterError, TypeError, ValueError):
    """A range parameter failed validation.

    Subclasses both ``TypeError`` and ``ValueError`` so callers guarding
    against either builtin also catch it.
    """

    def __init__(self, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"{parameter} {reason}")

    def format_message(self) -> str:
        return f"{self.msg}, got: {self.value!r}"


def fail(parameter: str, value: Any, reason: str) -> NoReturn:
    """Raise an InvalidArgument for the given parameter"""
    raise InvalidArgument(parameter, value, reason)
