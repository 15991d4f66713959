"""Port interfaces for message capabilities and output sinks.

Payload types opt into custom rendering by implementing Displayable or
TextMarshaler. Any object with a write(str) method can serve as a Sink.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Displayable(Protocol):
    """A value that can render itself as display text."""

    def display(self) -> str:
        """Return the text shown for this value."""
        ...


@runtime_checkable
class TextMarshaler(Protocol):
    """A value that can marshal itself to text, possibly failing."""

    def marshal_text(self) -> bytes | str:
        """Return the text form of this value.

        Raises:
            Exception: Any error signals that the value cannot be marshalled.
        """
        ...


@runtime_checkable
class Sink(Protocol):
    """Output stream the framed lines are written to."""

    def write(self, text: str) -> object:
        """Write a framed line in a single call."""
        ...
