"""Helper functions for creating StatisticsRecord objects."""

from typing import Any

from zerolog.core.models import AggregationType, StatisticsRecord


def average(
    key: str,
    value: float,
    tags: dict[str, Any] | None = None,
) -> StatisticsRecord:
    """Create a statistics record averaged by the monitor.

    Args:
        key: Metric key (e.g., "disk.io.read")
        value: Measured value
        tags: Optional tag annotations

    Returns:
        StatisticsRecord with AVERAGE aggregation
    """
    return StatisticsRecord(
        key=key,
        value=value,
        aggregation=AggregationType.AVERAGE,
        tags=tags or {},
    )


def differentiate(
    key: str,
    value: float,
    tags: dict[str, Any] | None = None,
) -> StatisticsRecord:
    """Create a statistics record differentiated by the monitor.

    Use this for monotonically increasing counters whose rate matters.

    Args:
        key: Metric key (e.g., "net.rx.bytes")
        value: Current counter value
        tags: Optional tag annotations

    Returns:
        StatisticsRecord with DIFFERENTIATE aggregation
    """
    return StatisticsRecord(
        key=key,
        value=value,
        aggregation=AggregationType.DIFFERENTIATE,
        tags=tags or {},
    )
