"""Python logging handler adapter for zerolog.

This adapter bridges Python's standard library logging module to the
0-Core wire format, so existing logging calls end up on the monitor's
stream.
"""

import logging
import sys

from zerolog.core.dispatch import format_message, to_level
from zerolog.core.framing import write_line
from zerolog.core.models import Level, StatisticsRecord
from zerolog.core.ports import Sink

# Attribute a record can carry (via ``extra``) to force its wire level
LEVEL_ATTR = "zerolog_level"


class ZeroLogHandler(logging.Handler):
    """Logging handler that writes records as 0-Core log lines.

    Records at or above ``stderr_level`` are written at Level.STDERR, all
    others at Level.STDOUT. A record whose message is a StatisticsRecord is
    written at Level.STATISTICS.

    Example:
        ```python
        import logging
        from zerolog import ZeroLogHandler

        logging.getLogger().addHandler(ZeroLogHandler())
        logging.getLogger().error("disk full")  # 2::disk full
        ```
    """

    def __init__(
        self,
        sink: Sink | None = None,
        stderr_level: int = logging.ERROR,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler.

        Args:
            sink: Output stream. Defaults to sys.stdout looked up per record.
            stderr_level: Minimum record level routed to Level.STDERR.
            level: Standard handler threshold.
        """
        super().__init__(level)
        self._sink = sink
        self.stderr_level = stderr_level

    def wire_level(self, record: logging.LogRecord) -> Level:
        """Pick the wire level a record is written at."""
        forced = getattr(record, LEVEL_ATTR, None)
        if forced is not None:
            return to_level(forced)
        if isinstance(record.msg, StatisticsRecord):
            return Level.STATISTICS
        if record.levelno >= self.stderr_level:
            return Level.STDERR
        return Level.STDOUT

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the sink.

        Args:
            record: The log record to emit.
        """
        try:
            lvl = self.wire_level(record)
            if lvl in (Level.STDOUT, Level.STDERR):
                payload = format_message(lvl, self.format(record))
            else:
                # structured levels serialize record.msg itself
                payload = format_message(lvl, record.msg)
            sink = self._sink if self._sink is not None else sys.stdout
            write_line(sink, lvl, payload)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
