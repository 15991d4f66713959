"""Core domain models for 0-Core log messages."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class Level(IntEnum):
    """Wire level understood by the 0-Core log monitor.

    The numeric values are part of the wire format and must not change.
    """

    STDOUT = 1
    STDERR = 2
    STATISTICS = 10
    JSON = 20
    YAML = 21
    TOML = 22


class AggregationType(Enum):
    """Aggregation strategy the statistics monitor applies per key."""

    AVERAGE = "A"
    DIFFERENTIATE = "D"


MetricTags = Mapping[str, Any]


@dataclass(frozen=True)
class StatisticsRecord:
    """A statistics message for the 0-Core statistics monitor.

    Attributes:
        key: Metric key, must not be empty.
        value: The measured value.
        aggregation: How repeated values for the key are combined.
        tags: Free-form annotations rendered as ``tag=value`` pairs.

    Validation happens when the record is formatted, so an invalid record
    can still be built and handed to ``log()``.
    """

    key: str
    value: float
    aggregation: AggregationType | str = AggregationType.AVERAGE
    tags: MetricTags = field(default_factory=dict)
