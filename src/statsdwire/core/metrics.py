"""Metric helper functions for creating Metric objects."""

import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from statsdwire.core.codes import MetricType
from statsdwire.core.models import Metric, SampleRate
from statsdwire.core.tags import TagsLike


def counter(
    metric: str,
    name: str,
    value: float = 1.0,
    sample_rate: SampleRate | float | None = None,
    tags: TagsLike | None = None,
) -> Metric:
    """Create a counter metric.

    Args:
        metric: Metric namespace (e.g., "gluster")
        name: Metric name (e.g., "heal_count")
        value: Increment value (default: 1.0)
        sample_rate: Optional sample rate between 0.0 and 1.0
        tags: Optional ordered tags

    Returns:
        Metric of type COUNTER
    """
    return Metric(
        metric=metric,
        name=name,
        value=value,
        metric_type=MetricType.COUNTER,
        sample_rate=sample_rate,
        tags=tags,
    )


def gauge(
    metric: str,
    name: str,
    value: float,
    tags: TagsLike | None = None,
) -> Metric:
    """Create a gauge metric.

    Args:
        metric: Metric namespace
        name: Metric name (e.g., "cpu_percent")
        value: Current gauge value
        tags: Optional ordered tags

    Returns:
        Metric of type GAUGE
    """
    return Metric(
        metric=metric,
        name=name,
        value=value,
        metric_type=MetricType.GAUGE,
        tags=tags,
    )


def timer(
    metric: str,
    name: str,
    value_ms: float,
    sample_rate: SampleRate | float | None = None,
    tags: TagsLike | None = None,
) -> Metric:
    """Create a timer metric from a duration in milliseconds."""
    return Metric(
        metric=metric,
        name=name,
        value=value_ms,
        metric_type=MetricType.TIMER,
        sample_rate=sample_rate,
        tags=tags,
    )


def histogram(
    metric: str,
    name: str,
    value: float,
    sample_rate: SampleRate | float | None = None,
    tags: TagsLike | None = None,
) -> Metric:
    """Create a histogram metric for a single observation.

    Unlike Prometheus-style histograms, bucketing happens in the agent, so a
    single observation maps to a single line.
    """
    return Metric(
        metric=metric,
        name=name,
        value=value,
        metric_type=MetricType.HISTOGRAM,
        sample_rate=sample_rate,
        tags=tags,
    )


def set_metric(
    metric: str,
    name: str,
    value: float,
    tags: TagsLike | None = None,
) -> Metric:
    """Create a set metric counting unique values."""
    return Metric(
        metric=metric,
        name=name,
        value=value,
        metric_type=MetricType.SET,
        tags=tags,
    )


@dataclass
class TimedResult:
    """Result object for the timed context manager."""

    metric: Metric | None = None


@contextmanager
def timed(
    metric: str,
    name: str,
    sample_rate: SampleRate | float | None = None,
    tags: TagsLike | None = None,
) -> Generator[TimedResult]:
    """Context manager that measures the enclosed block as a timer metric.

    Args:
        metric: Metric namespace
        name: Metric name
        sample_rate: Optional sample rate between 0.0 and 1.0
        tags: Optional ordered tags

    Yields:
        TimedResult whose metric is set once the block exits
    """
    # Validate before running the block
    if sample_rate is not None and not isinstance(sample_rate, SampleRate):
        sample_rate = SampleRate(sample_rate)
    result = TimedResult()
    start = time.perf_counter()
    try:
        yield result
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        result.metric = timer(
            metric, name, elapsed_ms, sample_rate=sample_rate, tags=tags
        )
