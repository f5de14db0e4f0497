"""
This module defines the rangeiter features using a unified registry system.
The command line front end dispatches through this registry.
"""

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Optional,
    TypeVar,
)
from dataclasses import dataclass
import itertools
import logging

from rangeiter.error_msg import InvalidArgument
from rangeiter.range import make_range
from rangeiter.version import get_version

logger = logging.getLogger("rangeiter.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all rangeiter features"""

    name: str
    description: str
    handler: Callable
    cli_options: Optional[Dict[str, Any]] = None


class FeatureRegistry:
    """Registry for all rangeiter features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_range(
    start: Any = None,
    end: Any = None,
    increment: Any = 1,
    limit: Optional[int] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Build a range and a lazy, optionally capped, iterator over it"""
    try:
        sequence = make_range(start, end, increment)
    except InvalidArgument as e:
        logger.debug("Rejected range arguments: %s", e)
        return OperationResult[Dict[str, Any]].fail(str(e))

    if limit is not None and limit < 0:
        return OperationResult[Dict[str, Any]].fail(
            f"limit must be non-negative, got: {limit!r}"
        )

    values = iter(sequence)
    if limit is not None:
        values = itertools.islice(values, limit)

    return OperationResult[Dict[str, Any]].ok(
        {"sequence": sequence, "values": values, "limit": limit}
    )


# ----------------- Feature Registration -----------------

version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the rangeiter version",
        handler=handle_version,
    )
)

range_feature = FeatureRegistry.register(
    Feature(
        name="range",
        description="Produce the values of a numeric range",
        handler=handle_range,
        cli_options={
            "start": {"help": "Inclusive start, or the exclusive end when END is omitted"},
            "end": {"help": "Exclusive end, may be inf or -inf"},
            "increment": {"default": "1", "help": "Step between values"},
            "limit": {"default": None, "help": "Print at most this many values"},
        },
    )
)
