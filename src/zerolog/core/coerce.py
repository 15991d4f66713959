"""Coercion of message payloads into their canonical wire text."""

import dataclasses
import json
import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

import yaml

from zerolog.core.errors import (
    InvalidAggregationTypeError,
    InvalidMessageError,
    NilMessageError,
    NilStatisticsKeyError,
)
from zerolog.core.message import (
    DisplayMessage,
    MarshalMessage,
    PlainString,
    to_message,
)
from zerolog.core.models import AggregationType, StatisticsRecord
from zerolog.core.ports import Displayable, TextMarshaler


def coerce_string(value: Any) -> str:
    """Turn a payload into text for the plain stdout/stderr levels.

    Args:
        value: The caller-supplied payload.

    Returns:
        The payload text.

    Raises:
        NilMessageError: The payload is None or an empty string.
        InvalidMessageError: The payload cannot be turned into text, or its
            marshal_text() failed.
    """
    message = to_message(value)
    if message is None:
        raise NilMessageError()
    if isinstance(message, PlainString):
        if not message.text:
            raise NilMessageError()
        return message.text
    if isinstance(message, DisplayMessage):
        text = message.render()
        if not isinstance(text, str):
            raise InvalidMessageError(
                f"display() returned {type(text).__name__}, not text"
            )
        return text
    if isinstance(message, MarshalMessage):
        try:
            return message.render()
        except Exception as exc:
            raise InvalidMessageError(cause=exc) from exc
    raise InvalidMessageError("could not turn message into string")


def format_float(value: float) -> str:
    """Format a float with the shortest digits that round-trip it.

    Positional notation is always used, and integral values drop the
    fractional part.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def tag_value_string(value: Any) -> str:
    """Render a single tag value; never fails."""
    if isinstance(value, str):
        return value
    if isinstance(value, Displayable):
        return value.display()
    if isinstance(value, TextMarshaler):
        try:
            return MarshalMessage(value).render()
        except Exception:
            # a failed marshal falls back to the generic forms below
            pass
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def format_tags(tags: Mapping[str, Any] | None) -> str:
    """Render tags as comma-joined ``key=value`` pairs.

    Returns an empty string for empty or missing tags.
    """
    if not tags:
        return ""
    return ",".join(f"{key}={tag_value_string(val)}" for key, val in tags.items())


def validate_statistics(record: StatisticsRecord) -> AggregationType:
    """Validate a statistics record and return its aggregation type.

    Raises:
        NilStatisticsKeyError: The record has no key.
        InvalidAggregationTypeError: The aggregation is not A or D.
    """
    if not record.key:
        raise NilStatisticsKeyError()
    try:
        return AggregationType(record.aggregation)
    except ValueError as exc:
        raise InvalidAggregationTypeError(cause=exc) from exc


def coerce_statistics(value: Any) -> str:
    """Validate and format a statistics payload.

    The output has the form ``key:value|aggregation[|tag=val,...]``.

    Raises:
        InvalidMessageError: The payload is not a StatisticsRecord, or its
            value is not a number.
        NilStatisticsKeyError: The record has no key.
        InvalidAggregationTypeError: The aggregation is not recognized.
    """
    if not isinstance(value, StatisticsRecord):
        raise InvalidMessageError()
    aggregation = validate_statistics(value)
    if isinstance(value.value, bool) or not isinstance(value.value, numbers.Real):
        raise InvalidMessageError(
            f"statistics value must be a number, not {type(value.value).__name__}"
        )

    text = f"{value.key}:{format_float(value.value)}|{aggregation.value}"
    tags = format_tags(value.tags)
    if tags:
        text = f"{text}|{tags}"
    return text


def _marshaled_text(value: TextMarshaler) -> str:
    try:
        return MarshalMessage(value).render()
    except Exception as exc:
        raise TypeError(
            f"Object of type {type(value).__name__} failed to marshal: {exc}"
        ) from exc


def _plain_default(value: Any) -> Any:
    if isinstance(value, TextMarshaler):
        return _marshaled_text(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def _to_plain(value: Any) -> Any:
    """Recursively convert dataclasses, enums and marshalers into plain values."""
    if isinstance(value, TextMarshaler):
        return _marshaled_text(value)
    if isinstance(value, Enum):
        return _to_plain(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_plain(_plain_default(value))
    if isinstance(value, Mapping):
        return {_to_plain(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def coerce_json(value: Any) -> str:
    """Serialize a payload as compact JSON.

    Raises:
        NilMessageError: The payload is None.
        InvalidMessageError: The payload is not JSON serializable.
    """
    if value is None:
        raise NilMessageError()
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_plain_default,
        )
    except (TypeError, ValueError) as exc:
        raise InvalidMessageError(cause=exc) from exc


def coerce_yaml(value: Any) -> str:
    """Serialize a payload as a YAML document.

    Raises:
        NilMessageError: The payload is None.
        InvalidMessageError: The payload is not YAML serializable.
    """
    if value is None:
        raise NilMessageError()
    try:
        text = yaml.safe_dump(
            _to_plain(value), sort_keys=False, allow_unicode=True, explicit_end=False
        )
    except (yaml.YAMLError, TypeError) as exc:
        raise InvalidMessageError(cause=exc) from exc
    # a root scalar is followed by a "..." document end marker
    return text.removesuffix("\n").removesuffix("\n...")
