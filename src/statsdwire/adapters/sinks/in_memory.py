"""In-memory line sink adapter."""

from collections.abc import AsyncIterable


class InMemoryLineSink:
    """In-memory implementation of LineSinkPort.

    Stores encoded lines in a list. Suitable for testing and for inspecting
    what would be sent to the agent without opening a socket.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    async def send(self, line: str) -> None:
        """Store an encoded line."""
        self._lines.append(line)

    async def read(self) -> AsyncIterable[str]:
        """Read stored lines in the order they were sent."""
        for line in list(self._lines):
            yield line

    def clear(self) -> None:
        """Discard all stored lines."""
        self._lines.clear()
