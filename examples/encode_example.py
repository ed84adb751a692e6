"""Example encoding metrics, an event and a service check.

Run with:
    python examples/encode_example.py

Lines are collected in an InMemoryLineSink and printed. A real deployment
would pass a UDP sender implementing LineSinkPort instead.
"""

import asyncio
import logging
from datetime import datetime, timezone

from statsdwire import (
    AlertType,
    Event,
    InMemoryLineSink,
    Priority,
    ServiceCheck,
    StatsdEventHandler,
    Status,
    WireDefaults,
    apply_defaults,
    counter,
    gauge,
    timed,
)

defaults = WireDefaults.from_env()
sink = InMemoryLineSink()

# Forward WARNING and above from the "gluster" logger as events
logger = logging.getLogger("gluster")
logger.addHandler(StatsdEventHandler(sink, defaults=defaults, level=logging.WARNING))


async def main() -> None:
    tags = {"volume": "gv0", "replicated": None}

    heal_count = gauge("gluster", "heal_count", 0, tags=tags)
    await sink.send(apply_defaults(heal_count, defaults).serialize())
    writes = counter("gluster", "writes", 3, sample_rate=0.5)
    await sink.send(apply_defaults(writes, defaults).serialize())

    with timed("gluster", "scan", tags=tags) as result:
        await asyncio.sleep(0.01)
    if result.metric is not None:
        await sink.send(apply_defaults(result.metric, defaults).serialize())

    event = Event(
        title="Heal started",
        text="Self-heal daemon started on gv0",
        timestamp=datetime.now(timezone.utc),
        priority=Priority.LOW,
        alert_type=AlertType.INFO,
        tags=tags,
    )
    await sink.send(apply_defaults(event, defaults).serialize())

    check = ServiceCheck(name="GlusterD", status=Status.OK, service_message="volume ok")
    await sink.send(apply_defaults(check, defaults).serialize())

    await print_lines()


async def print_lines() -> None:
    async for line in sink.read():
        print(line)


if __name__ == "__main__":
    asyncio.run(main())
    sink.clear()
    # The handler runs its own event loop, so log outside asyncio.run
    logger.warning("brick %s offline", "gv0-b1")
    asyncio.run(print_lines())
