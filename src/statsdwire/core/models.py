"""Core domain models for DogStatsD telemetry primitives."""

import math
from dataclasses import dataclass
from datetime import datetime

from statsdwire.core.codes import AlertType, MetricType, Priority, Status
from statsdwire.core.encoding.dogstatsd import (
    encode_event,
    encode_metric,
    encode_service_check,
)
from statsdwire.core.errors import ValidationError
from statsdwire.core.tags import TagMap, TagsLike


def _coerce_tags(tags: TagsLike | None) -> TagMap | None:
    return None if tags is None else TagMap.of(tags)


@dataclass(frozen=True)
class SampleRate:
    """Fraction of occurrences actually sent, in the closed interval [0.0, 1.0].

    Attributes:
        value: The rate. 1.0 means every occurrence is sent.

    Raises:
        ValidationError: If value lies outside [0.0, 1.0] or is NaN.
    """

    value: float

    def __post_init__(self) -> None:
        # @tra: Core.SampleRate.Bounds
        if math.isnan(self.value) or self.value < 0.0 or self.value > 1.0:
            raise ValidationError("Sample values must be between 0.0 and 1.0")


@dataclass(frozen=True)
class Metric:
    """A single metric measurement.

    Attributes:
        metric: Metric namespace (e.g., gluster). Must not contain ``:``, ``|`` or ``@``.
        name: Metric name within the namespace (e.g., heal_count).
        value: The measured value.
        metric_type: Counter, gauge, timer, histogram or set.
        sample_rate: Optional sample rate. Only meaningful for counters,
            histograms and timers; the agent assumes 1 when absent.
        tags: Optional ordered tags.
    """

    metric: str
    name: str
    value: float
    metric_type: MetricType
    sample_rate: SampleRate | None = None
    tags: TagMap | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metric_type", MetricType(self.metric_type))
        if self.sample_rate is not None and not isinstance(
            self.sample_rate, SampleRate
        ):
            object.__setattr__(self, "sample_rate", SampleRate(self.sample_rate))
        object.__setattr__(self, "tags", _coerce_tags(self.tags))

    def serialize(self) -> str:
        """Render as ``metric.name:value|type[|@rate][|#tags]``."""
        return encode_metric(self)


@dataclass(frozen=True)
class Event:
    """An event posted to the agent's event stream.

    ``aggregation_key`` and ``source_type`` are carried on the model but are
    not written by the encoder.
    """

    title: str
    text: str
    timestamp: datetime | None = None
    hostname: str | None = None
    aggregation_key: str | None = None
    priority: Priority | None = None
    source_type: str | None = None
    alert_type: AlertType | None = None
    tags: TagMap | None = None

    def __post_init__(self) -> None:
        if self.priority is not None:
            object.__setattr__(self, "priority", Priority(self.priority))
        if self.alert_type is not None:
            object.__setattr__(self, "alert_type", AlertType(self.alert_type))
        object.__setattr__(self, "tags", _coerce_tags(self.tags))

    def serialize(self) -> str:
        """Render as ``_e{len,len}:title|text[|d:..][|h:..][|p:..][|t:..][|#..]``.

        Raises:
            ClockError: If timestamp precedes the Unix epoch.
        """
        return encode_event(self)


@dataclass(frozen=True)
class ServiceCheck:
    """Health status report for a named service.

    Attributes:
        name: Service check name (e.g., GlusterD).
        status: OK, WARNING, CRITICAL or UNKNOWN.
        timestamp: Optional time of the check.
        hostname: Optional host the check applies to.
        tags: Optional ordered tags.
        service_message: Optional free-text description of the status.
    """

    name: str
    status: Status
    timestamp: datetime | None = None
    hostname: str | None = None
    tags: TagMap | None = None
    service_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", Status(self.status))
        object.__setattr__(self, "tags", _coerce_tags(self.tags))

    def serialize(self) -> str:
        """Render as ``_sc|name|status[|d:..][|h:..][|#..][|m:..]``.

        Raises:
            ClockError: If timestamp precedes the Unix epoch.
        """
        return encode_service_check(self)
