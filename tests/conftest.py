"""Shared test fixtures for all test modules."""

import pytest

from zerolog.adapters.sinks import InMemorySink
from zerolog.core.models import AggregationType, StatisticsRecord


@pytest.fixture
def sink() -> InMemorySink:
    """Provide an empty in-memory sink."""
    return InMemorySink()


@pytest.fixture
def stat_record() -> StatisticsRecord:
    """A valid statistics record with a single tag."""
    return StatisticsRecord(
        key="somekey",
        value=123.456,
        aggregation=AggregationType.AVERAGE,
        tags={"foo": "bar"},
    )


class BrokenSink:
    """Sink whose write always fails."""

    def write(self, text: str) -> int:
        raise OSError("sink closed")


@pytest.fixture
def broken_sink() -> BrokenSink:
    """Provide a sink that raises on write."""
    return BrokenSink()
