"""Formatter for the 0-Core log monitor wire format.

Usage:
    ```python
    import zerolog

    zerolog.log(zerolog.Level.STDOUT, "Hello world")  # 1::Hello world
    ```
"""

from zerolog.adapters.logging import ZeroLogHandler
from zerolog.adapters.sinks import InMemorySink
from zerolog.core.dispatch import format_message
from zerolog.core.errors import (
    ErrorKind,
    InvalidAggregationTypeError,
    InvalidLevelError,
    InvalidMessageError,
    LevelNotImplementedError,
    NilMessageError,
    NilStatisticsKeyError,
    ZeroLogError,
)
from zerolog.core.framing import frame, is_multiline, write_line
from zerolog.core.logger import Logger, format_line, log
from zerolog.core.models import AggregationType, Level, MetricTags, StatisticsRecord
from zerolog.core.ports import Displayable, Sink, TextMarshaler
from zerolog.core.statistics import average, differentiate

__all__ = [
    "AggregationType",
    "Displayable",
    "ErrorKind",
    "InMemorySink",
    "InvalidAggregationTypeError",
    "InvalidLevelError",
    "InvalidMessageError",
    "Level",
    "LevelNotImplementedError",
    "Logger",
    "MetricTags",
    "NilMessageError",
    "NilStatisticsKeyError",
    "Sink",
    "StatisticsRecord",
    "TextMarshaler",
    "ZeroLogError",
    "ZeroLogHandler",
    "average",
    "differentiate",
    "format_line",
    "format_message",
    "frame",
    "is_multiline",
    "log",
    "write_line",
]
