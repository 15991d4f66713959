"""Adapters bridging zerolog to the standard library and to sinks."""

from zerolog.adapters.logging import ZeroLogHandler
from zerolog.adapters.sinks import InMemorySink

__all__ = [
    "InMemorySink",
    "ZeroLogHandler",
]
