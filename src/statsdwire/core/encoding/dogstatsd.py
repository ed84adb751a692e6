"""DogStatsD wire-format encoder for metrics, events and service checks.

Each encoder returns one line without a trailing newline. Optional segments
are written in a fixed order per primitive and only when the field is set.
"""

import math
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from statsdwire.core.errors import ClockError
from statsdwire.core.ports import StatsdSerializable
from statsdwire.core.tags import format_tags

if TYPE_CHECKING:
    from statsdwire.core.models import Event, Metric, ServiceCheck

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_number(value: float) -> str:
    """Format a number as shortest round-trip decimal text.

    Never uses exponent notation and drops a trailing ``.0``, so 0.0 renders
    as ``0`` and 1e21 as ``1000000000000000000000``.

    Args:
        value: Number to format.

    Returns:
        Decimal text, or ``inf``/``-inf``/``NaN`` for non-finite values.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def timestamp_ms(timestamp: datetime) -> int:
    """Convert a point in time to milliseconds since the Unix epoch.

    Sub-second precision is discarded. Naive datetimes are taken as UTC.

    Args:
        timestamp: Point in time to convert.

    Returns:
        Whole seconds since the epoch multiplied by 1000.

    Raises:
        ClockError: If timestamp precedes the Unix epoch.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    delta = timestamp - UNIX_EPOCH
    # @tra: Core.Encoding.Timestamp.BeforeEpoch
    if delta < timedelta(0):
        raise ClockError(f"timestamp {timestamp.isoformat()} precedes the Unix epoch")
    return (delta.days * 86400 + delta.seconds) * 1000


def encode_metric(metric: "Metric") -> str:
    """Encode a metric as ``metric.name:value|type[|@rate][|#tags]``."""
    parts = [
        f"{metric.metric}.{metric.name}:{format_number(metric.value)}"
        f"|{metric.metric_type.value}"
    ]
    if metric.sample_rate is not None:
        parts.append(f"|@{format_number(metric.sample_rate.value)}")
    if metric.tags is not None:
        parts.append(f"|#{format_tags(metric.tags)}")
    return "".join(parts)


def encode_event(event: "Event") -> str:
    """Encode an event.

    Layout::

        _e{<title bytes>,<text bytes>}:<title>|<text>[|d:<ms>][|h:<host>][|p:<priority>][|t:<alert>][|#<tags>]

    Lengths are UTF-8 byte counts. ``aggregation_key`` and ``source_type``
    are not written.

    Raises:
        ClockError: If the event timestamp precedes the Unix epoch.
    """
    title_len = len(event.title.encode("utf-8"))
    text_len = len(event.text.encode("utf-8"))
    parts = [f"_e{{{title_len},{text_len}}}:{event.title}|{event.text}"]
    if event.timestamp is not None:
        parts.append(f"|d:{timestamp_ms(event.timestamp)}")
    if event.hostname is not None:
        parts.append(f"|h:{event.hostname}")
    if event.priority is not None:
        parts.append(f"|p:{event.priority.value}")
    if event.alert_type is not None:
        parts.append(f"|t:{event.alert_type.value}")
    if event.tags is not None:
        parts.append(f"|#{format_tags(event.tags)}")
    return "".join(parts)


def encode_service_check(check: "ServiceCheck") -> str:
    """Encode a service check as ``_sc|name|status[|d:ms][|h:host][|#tags][|m:msg]``.

    Raises:
        ClockError: If the check timestamp precedes the Unix epoch.
    """
    parts = [f"_sc|{check.name}|{check.status.value}"]
    if check.timestamp is not None:
        parts.append(f"|d:{timestamp_ms(check.timestamp)}")
    if check.hostname is not None:
        parts.append(f"|h:{check.hostname}")
    if check.tags is not None:
        parts.append(f"|#{format_tags(check.tags)}")
    if check.service_message is not None:
        parts.append(f"|m:{check.service_message}")
    return "".join(parts)


def encode(primitive: StatsdSerializable) -> str:
    """Encode any serializable primitive to its wire line.

    Args:
        primitive: A Metric, Event or ServiceCheck.

    Returns:
        The wire-format line.

    Raises:
        TypeError: If primitive does not provide serialize().
        ClockError: If the primitive's timestamp precedes the Unix epoch.
    """
    if not isinstance(primitive, StatsdSerializable):
        raise TypeError(
            f"expected a serializable primitive, got {type(primitive).__name__}"
        )
    return primitive.serialize()
