"""Level dispatch: select the coercer matching a level's payload shape."""

from collections.abc import Callable
from typing import Any

from zerolog.core.coerce import (
    coerce_json,
    coerce_statistics,
    coerce_string,
    coerce_yaml,
)
from zerolog.core.errors import InvalidLevelError, LevelNotImplementedError
from zerolog.core.models import Level

_COERCERS: dict[Level, Callable[[Any], str]] = {
    Level.STDOUT: coerce_string,
    Level.STDERR: coerce_string,
    Level.STATISTICS: coerce_statistics,
    Level.JSON: coerce_json,
    Level.YAML: coerce_yaml,
}


def to_level(level: Level | int) -> Level:
    """Resolve a raw level value into a Level.

    Raises:
        InvalidLevelError: The value is not a recognized level.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError()
    try:
        return Level(level)
    except ValueError as exc:
        raise InvalidLevelError(cause=exc) from exc


def format_message(level: Level | int, message: Any) -> str:
    """Coerce a message into the payload text for the given level.

    The level is checked before the message is looked at.

    Args:
        level: A Level or its integer value.
        message: The caller-supplied payload.

    Returns:
        The unframed payload text.

    Raises:
        InvalidLevelError: The level is not recognized.
        LevelNotImplementedError: The level is recognized but unsupported.
        ZeroLogError: Any coercion error for the payload.
    """
    lvl = to_level(level)
    coercer = _COERCERS.get(lvl)
    if coercer is None:
        raise LevelNotImplementedError(f"logging level {lvl.name} not implemented")
    return coercer(message)
