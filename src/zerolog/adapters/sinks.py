"""In-memory sink adapter."""


class InMemorySink:
    """In-memory implementation of Sink.

    Keeps every written line in a list. Suitable for testing and for
    hosts that forward lines to the monitor themselves.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write(self, text: str) -> int:
        """Record one framed line."""
        self._lines.append(text)
        return len(text)

    @property
    def lines(self) -> list[str]:
        """Lines written so far, oldest first."""
        return list(self._lines)

    def getvalue(self) -> str:
        """Return everything written as one string."""
        return "".join(self._lines)

    def clear(self) -> None:
        self._lines.clear()
