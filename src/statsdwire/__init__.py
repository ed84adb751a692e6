"""statsdwire: DogStatsD wire-format encoding for metrics, events and service checks."""

from statsdwire.adapters.logging import StatsdEventHandler
from statsdwire.adapters.sinks.in_memory import InMemoryLineSink
from statsdwire.core.codes import AlertType, MetricType, Priority, Status
from statsdwire.core.config import DatadogEnvSettings, WireDefaults, apply_defaults
from statsdwire.core.encoding.dogstatsd import (
    encode,
    encode_event,
    encode_metric,
    encode_service_check,
    format_number,
    timestamp_ms,
)
from statsdwire.core.errors import ClockError, StatsdWireError, ValidationError
from statsdwire.core.metrics import (
    counter,
    gauge,
    histogram,
    set_metric,
    timed,
    timer,
)
from statsdwire.core.models import Event, Metric, SampleRate, ServiceCheck
from statsdwire.core.ports import LineSinkPort, StatsdSerializable
from statsdwire.core.tags import TagMap, format_tags

__all__ = [
    # Models
    "Event",
    "Metric",
    "SampleRate",
    "ServiceCheck",
    "TagMap",
    # Codes
    "AlertType",
    "MetricType",
    "Priority",
    "Status",
    # Encoding
    "encode",
    "encode_event",
    "encode_metric",
    "encode_service_check",
    "format_number",
    "format_tags",
    "timestamp_ms",
    # Helpers
    "counter",
    "gauge",
    "histogram",
    "set_metric",
    "timed",
    "timer",
    # Configuration
    "DatadogEnvSettings",
    "WireDefaults",
    "apply_defaults",
    # Ports
    "LineSinkPort",
    "StatsdSerializable",
    # Adapters
    "InMemoryLineSink",
    "StatsdEventHandler",
    # Errors
    "ClockError",
    "StatsdWireError",
    "ValidationError",
]
