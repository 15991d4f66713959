"""Line framing for the 0-Core wire format.

Single-line payloads are written as ``<level>::<payload>\\n``; payloads that
contain a line break are written as a block::

    <level>:::
    <payload>
    :::
"""

from zerolog.core.models import Level
from zerolog.core.ports import Sink


def is_multiline(payload: str) -> bool:
    """Return True when the payload contains a line break."""
    return "\n" in payload


def frame(level: Level | int, payload: str) -> str:
    """Wrap an already coerced payload in the wire delimiters."""
    if is_multiline(payload):
        return f"{int(level)}:::\n{payload}\n:::\n"
    return f"{int(level)}::{payload}\n"


def write_line(sink: Sink, level: Level | int, payload: str) -> None:
    """Frame a payload and write it to the sink in a single call.

    Errors raised by the sink propagate unchanged.
    """
    sink.write(frame(level, payload))
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()
