"""Polymorphic message model built at the call boundary.

Every payload handed to ``log()`` is converted once into one of a closed
set of variants. The coercers then dispatch on the variant in a fixed order
instead of probing the raw value repeatedly.
"""

from dataclasses import dataclass
from typing import Any

from zerolog.core.models import StatisticsRecord
from zerolog.core.ports import Displayable, TextMarshaler


@dataclass(frozen=True)
class PlainString:
    """A str payload, including str subclasses, reduced to its string data."""

    text: str


@dataclass(frozen=True)
class DisplayMessage:
    """A payload exposing display()."""

    value: Displayable

    def render(self) -> str:
        return self.value.display()


@dataclass(frozen=True)
class MarshalMessage:
    """A payload exposing marshal_text(). Rendering may raise."""

    value: TextMarshaler

    def render(self) -> str:
        text = self.value.marshal_text()
        if isinstance(text, (bytes, bytearray)):
            return bytes(text).decode("utf-8")
        if not isinstance(text, str):
            raise TypeError(
                f"marshal_text() returned {type(text).__name__}, not text"
            )
        return text


@dataclass(frozen=True)
class StructuredValue:
    """Any other payload, usable only by the structured serializers."""

    value: Any


Message = (
    PlainString | DisplayMessage | MarshalMessage | StructuredValue | StatisticsRecord
)


def to_message(value: Any) -> Message | None:
    """Convert a raw payload into its message variant.

    Variants are tried in priority order: string data, display(),
    marshal_text(), statistics record, then structured value. A value that
    offers both display() and marshal_text() becomes a DisplayMessage.

    Args:
        value: The caller-supplied payload.

    Returns:
        The matching variant, or None when the payload is None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        # str.__str__ drops any __str__ override of a subclass
        return PlainString(str.__str__(value))
    if isinstance(value, Displayable):
        return DisplayMessage(value)
    if isinstance(value, TextMarshaler):
        return MarshalMessage(value)
    if isinstance(value, StatisticsRecord):
        return value
    return StructuredValue(value)
