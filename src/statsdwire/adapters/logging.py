"""Python logging handler adapter for statsdwire.

This adapter bridges Python's standard library logging module to a
LineSinkPort, turning each log record into a DogStatsD event.
"""

import asyncio
import logging
import threading
import traceback
from datetime import datetime, timezone

from statsdwire.core.codes import AlertType, Priority
from statsdwire.core.config import WireDefaults, apply_defaults
from statsdwire.core.models import Event
from statsdwire.core.ports import LineSinkPort
from statsdwire.core.tags import TagMap

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def _alert_type_for_level(levelno: int) -> AlertType:
    """Map a logging level to an event alert type.

    - ERROR and above -> error
    - WARNING -> warning
    - anything lower -> info
    """
    if levelno >= logging.ERROR:
        return AlertType.ERROR
    if levelno >= logging.WARNING:
        return AlertType.WARNING
    return AlertType.INFO


class StatsdEventHandler(logging.Handler):
    """Logging handler that sends each log record as a DogStatsD event.

    Example:
        ```python
        from statsdwire import InMemoryLineSink, StatsdEventHandler, WireDefaults

        sink = InMemoryLineSink()
        handler = StatsdEventHandler(sink, defaults=WireDefaults.from_env())
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        sink: LineSinkPort,
        defaults: WireDefaults | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a line sink.

        Args:
            sink: Adapter implementing LineSinkPort.
            defaults: Hostname and constant tags applied to every event.
            level: Minimum level handled.
        """
        super().__init__(level)
        self._sink = sink
        self._defaults = defaults or WireDefaults()
        # Records logged while this thread is already emitting (asyncio's own
        # debug output, for one) are dropped to avoid unbounded recursion
        self._local = threading.local()
        self._pending: set[asyncio.Task[None]] = set()

    def build_event(self, record: logging.LogRecord) -> Event:
        """Convert a log record into an Event.

        Args:
            record: The log record to convert.

        Returns:
            Event titled with the logger name and carrying the message as text.
        """
        text = record.getMessage()
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, exc_tb = record.exc_info
            text = text + "\n" + "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )

        pairs: list[tuple[str, str | None]] = [
            ("level", record.levelname),
            ("logger", record.name),
        ]
        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                pairs.append((key, str(value)))

        event = Event(
            title=record.name,
            text=text,
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            priority=Priority.LOW if record.levelno <= logging.DEBUG else Priority.NORMAL,
            alert_type=_alert_type_for_level(record.levelno),
            tags=TagMap(tuple(pairs)),
        )
        return apply_defaults(event, self._defaults)

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the sink as an encoded event line.

        Inside a running event loop the send is scheduled as a task on that
        loop; otherwise it runs to completion in a fresh loop. Failures are
        reported through handleError and never reach the logging caller.

        Args:
            record: The log record to emit.
        """
        if getattr(self._local, "emitting", False):
            return
        self._local.emitting = True
        try:
            line = self.build_event(record).serialize()
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                asyncio.run(self._sink.send(line))
            else:
                task = loop.create_task(self._sink.send(line))
                self._pending.add(task)
                task.add_done_callback(self._pending.discard)
        except Exception:
            self.handleError(record)
        finally:
            self._local.emitting = False
