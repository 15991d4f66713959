"""Tests for core domain models."""

import dataclasses

import pytest

from zerolog.core.models import AggregationType, Level, StatisticsRecord


class TestLevel:
    """Tests for the Level enumeration."""

    @pytest.mark.core
    def test_wire_values_are_stable(self) -> None:
        """Level values match what the 0-Core monitor expects."""
        assert Level.STDOUT == 1
        assert Level.STDERR == 2
        assert Level.STATISTICS == 10
        assert Level.JSON == 20
        assert Level.YAML == 21
        assert Level.TOML == 22

    @pytest.mark.core
    def test_level_from_int(self) -> None:
        """A plain int resolves to the matching Level."""
        assert Level(10) is Level.STATISTICS


class TestAggregationType:
    """Tests for AggregationType."""

    @pytest.mark.core
    def test_codes(self) -> None:
        """Aggregation codes are A and D."""
        assert AggregationType.AVERAGE.value == "A"
        assert AggregationType.DIFFERENTIATE.value == "D"

    @pytest.mark.core
    def test_lookup_by_code(self) -> None:
        """A raw code looks up the member."""
        assert AggregationType("D") is AggregationType.DIFFERENTIATE


class TestStatisticsRecord:
    """Tests for StatisticsRecord."""

    @pytest.mark.core
    def test_defaults(self) -> None:
        """Aggregation defaults to AVERAGE and tags to an empty dict."""
        record = StatisticsRecord(key="k", value=1.0)
        assert record.aggregation is AggregationType.AVERAGE
        assert record.tags == {}

    @pytest.mark.core
    def test_record_is_immutable(self) -> None:
        """Records cannot be mutated after construction."""
        record = StatisticsRecord(key="k", value=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.key = "other"  # type: ignore[misc]

    @pytest.mark.core
    def test_invalid_record_can_be_constructed(self) -> None:
        """Validation is deferred until formatting."""
        record = StatisticsRecord(key="", value=1.0, aggregation="B")
        assert record.key == ""
        assert record.aggregation == "B"
