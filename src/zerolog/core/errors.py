"""Error kinds raised while formatting 0-Core log messages."""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds a log call can report."""

    INVALID_LEVEL = "logging level not valid"
    NIL_MESSAGE = "message was nil"
    INVALID_MESSAGE = "message was invalid"
    NIL_STATISTICS_KEY = "statistics key was missing"
    INVALID_AGGREGATION_TYPE = "invalid aggregation type"
    NOT_IMPLEMENTED = "logging level not implemented"


class ZeroLogError(Exception):
    """Base class for all formatting errors.

    Attributes:
        kind: The ErrorKind this error reports.
        cause: The underlying exception, when one triggered this error.
    """

    kind: ErrorKind

    def __init__(
        self, message: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message or self.kind.value)
        self.cause = cause


class InvalidLevelError(ZeroLogError, ValueError):
    kind = ErrorKind.INVALID_LEVEL


class NilMessageError(ZeroLogError, ValueError):
    kind = ErrorKind.NIL_MESSAGE


class InvalidMessageError(ZeroLogError, TypeError):
    kind = ErrorKind.INVALID_MESSAGE


class NilStatisticsKeyError(ZeroLogError, ValueError):
    kind = ErrorKind.NIL_STATISTICS_KEY


class InvalidAggregationTypeError(ZeroLogError, ValueError):
    kind = ErrorKind.INVALID_AGGREGATION_TYPE


class LevelNotImplementedError(ZeroLogError, NotImplementedError):
    kind = ErrorKind.NOT_IMPLEMENTED
