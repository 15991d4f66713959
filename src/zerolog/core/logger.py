"""Entry points that format a message and write it to a sink."""

import sys
from typing import Any

from zerolog.core.dispatch import format_message, to_level
from zerolog.core.framing import frame, write_line
from zerolog.core.models import Level, StatisticsRecord
from zerolog.core.ports import Sink


def format_line(level: Level | int, message: Any) -> str:
    """Return the fully framed wire line for a message without writing it."""
    payload = format_message(level, message)
    return frame(to_level(level), payload)


def log(level: Level | int, message: Any, sink: Sink | None = None) -> None:
    """Format a message in the 0-Core logging format and write it.

    Nothing is written when formatting fails.

    Args:
        level: A Level or its integer value.
        message: The payload; its accepted shape depends on the level.
        sink: Output stream; defaults to the current sys.stdout.

    Raises:
        ZeroLogError: The level or message is invalid.
    """
    payload = format_message(level, message)
    write_line(sink if sink is not None else sys.stdout, to_level(level), payload)


class Logger:
    """Binds a sink so repeated calls need not pass it.

    Example:
        ```python
        from zerolog import Logger, average

        logger = Logger()
        logger.stdout("Hello world")
        logger.statistics(average("cpu.load", 0.42, {"host": "node1"}))
        ```
    """

    def __init__(self, sink: Sink | None = None) -> None:
        """Initialize the logger.

        Args:
            sink: Output stream. When omitted, sys.stdout is looked up on
                every call so redirection after construction is honoured.
        """
        self._sink = sink

    @property
    def sink(self) -> Sink:
        return self._sink if self._sink is not None else sys.stdout

    def log(self, level: Level | int, message: Any) -> None:
        log(level, message, self.sink)

    def stdout(self, message: Any) -> None:
        self.log(Level.STDOUT, message)

    def stderr(self, message: Any) -> None:
        self.log(Level.STDERR, message)

    def statistics(self, record: StatisticsRecord) -> None:
        self.log(Level.STATISTICS, record)

    def json(self, message: Any) -> None:
        self.log(Level.JSON, message)

    def yaml(self, message: Any) -> None:
        self.log(Level.YAML, message)
