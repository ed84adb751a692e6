"""Enumerated codes and their DogStatsD wire tokens.

Each member's value is the token written on the wire, so every member is
guaranteed to have exactly one rendering.
"""

from enum import Enum


class _WireCode(str, Enum):
    """Enum whose string form is its wire token."""

    def __str__(self) -> str:
        return str(self.value)


class Priority(_WireCode):
    """Event priority (``p:`` segment)."""

    NORMAL = "normal"
    LOW = "low"


class AlertType(_WireCode):
    """Event alert type (``t:`` segment)."""

    ERROR = "error"
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"


class MetricType(_WireCode):
    """Metric type suffix following the value."""

    COUNTER = "c"
    GAUGE = "g"
    TIMER = "ms"
    HISTOGRAM = "h"
    SET = "s"


class Status(_WireCode):
    """Service check status code."""

    OK = "0"
    WARNING = "1"
    CRITICAL = "2"
    UNKNOWN = "3"
