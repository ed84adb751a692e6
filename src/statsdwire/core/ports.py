"""Port interfaces for serializable primitives and line sinks.

These protocols define the contracts between the encoding core and its
collaborators. A transport (UDP, TCP, Unix socket) implements LineSinkPort;
the core never performs I/O itself.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatsdSerializable(Protocol):
    """A telemetry primitive that renders itself as one wire-format line.

    Implemented by Metric, Event and ServiceCheck.
    """

    def serialize(self) -> str:
        """Return the wire-format line, without a trailing newline."""
        ...


@runtime_checkable
class LineSinkPort(Protocol):
    """Port for delivering encoded lines.

    Adapters implementing this protocol accept one encoded line per call.
    Examples: InMemoryLineSink, or an external UDP sender.
    """

    async def send(self, line: str) -> None:
        """Deliver a single encoded line."""
        ...
