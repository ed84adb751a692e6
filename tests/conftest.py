"""Shared test fixtures for all test modules."""

import asyncio
from datetime import datetime, timezone
from typing import Any

import pytest

from statsdwire.adapters.sinks.in_memory import InMemoryLineSink
from statsdwire.core.tags import TagMap


@pytest.fixture
def foo_bar_tags() -> TagMap:
    """Tags ``foo`` (bare) then ``bar:baz``, as used by the wire fixtures."""
    return TagMap.of({"foo": None, "bar": "baz"})


@pytest.fixture
def new_year_2020() -> datetime:
    """2020-01-01T00:00:00Z, which is 1577836800 seconds after the epoch."""
    return datetime(2020, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def line_sink() -> InMemoryLineSink:
    """Fixture providing an empty in-memory line sink."""
    return InMemoryLineSink()


@pytest.fixture
def read_lines():
    """Factory fixture returning a sync helper that drains a sink's lines.

    Usage:
        def test_something(line_sink, read_lines):
            ...
            assert read_lines(line_sink) == ["a.b:1|c"]
    """

    async def _collect(sink: InMemoryLineSink) -> list[str]:
        return [line async for line in sink.read()]

    def _read(sink: InMemoryLineSink) -> list[Any]:
        return asyncio.run(_collect(sink))

    return _read
