"""Line sink adapters implementing LineSinkPort."""

from statsdwire.adapters.sinks.in_memory import InMemoryLineSink

__all__ = [
    "InMemoryLineSink",
]
