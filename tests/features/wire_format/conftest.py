"""BDD step definitions for wire-format encoding features."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from statsdwire.core.codes import MetricType, Status
from statsdwire.core.errors import ClockError, ValidationError
from statsdwire.core.models import Event, Metric, ServiceCheck
from statsdwire.core.tags import TagMap


@dataclass
class WireScenarioContext:
    """State shared between the steps of one scenario."""

    kind: type | None = None
    fields: dict[str, Any] = field(default_factory=dict)
    line: str | None = None
    error: Exception | None = None


def _parse_tags(raw: str) -> TagMap:
    pairs = []
    for entry in raw.split(","):
        key, sep, value = entry.partition(":")
        pairs.append((key, value if sep else None))
    return TagMap(tuple(pairs))


@pytest.fixture
def ctx() -> WireScenarioContext:
    """Fresh scenario context for each test."""
    return WireScenarioContext()


# === Primitive Steps ===
@given(
    parsers.parse(
        'a "{type_name}" metric "{metric}" named "{name}" with value {value:g}'
    )
)
def step_metric(
    ctx: WireScenarioContext, type_name: str, metric: str, name: str, value: float
) -> None:
    ctx.kind = Metric
    ctx.fields.update(
        metric=metric,
        name=name,
        value=value,
        metric_type=MetricType[type_name.upper()],
    )


@given(parsers.parse('an event titled "{title}" with text "{text}"'))
def step_event(ctx: WireScenarioContext, title: str, text: str) -> None:
    ctx.kind = Event
    ctx.fields.update(title=title, text=text)


@given(parsers.parse('a service check "{name}" with status "{status}"'))
def step_service_check(ctx: WireScenarioContext, name: str, status: str) -> None:
    ctx.kind = ServiceCheck
    ctx.fields.update(name=name, status=Status[status])


# === Optional Field Steps ===
@given(parsers.parse('tags "{raw}"'))
def step_tags(ctx: WireScenarioContext, raw: str) -> None:
    ctx.fields["tags"] = _parse_tags(raw)


@given(parsers.parse("sample rate {rate:g}"))
def step_sample_rate(ctx: WireScenarioContext, rate: float) -> None:
    ctx.fields["sample_rate"] = rate


@given(parsers.parse('hostname "{hostname}"'))
def step_hostname(ctx: WireScenarioContext, hostname: str) -> None:
    ctx.fields["hostname"] = hostname


@given(parsers.parse('priority "{priority}"'))
def step_priority(ctx: WireScenarioContext, priority: str) -> None:
    ctx.fields["priority"] = priority


@given(parsers.parse('alert type "{alert_type}"'))
def step_alert_type(ctx: WireScenarioContext, alert_type: str) -> None:
    ctx.fields["alert_type"] = alert_type


@given(parsers.parse('timestamp "{iso}"'))
def step_timestamp(ctx: WireScenarioContext, iso: str) -> None:
    ctx.fields["timestamp"] = datetime.fromisoformat(iso)


@given(parsers.parse('aggregation key "{key}"'))
def step_aggregation_key(ctx: WireScenarioContext, key: str) -> None:
    ctx.fields["aggregation_key"] = key


@given(parsers.parse('source type "{source}"'))
def step_source_type(ctx: WireScenarioContext, source: str) -> None:
    ctx.fields["source_type"] = source


@given(parsers.parse('service message "{message}"'))
def step_service_message(ctx: WireScenarioContext, message: str) -> None:
    ctx.fields["service_message"] = message


# === Action Steps ===
@when("the primitive is serialized")
def step_serialize(ctx: WireScenarioContext) -> None:
    assert ctx.kind is not None
    try:
        ctx.line = ctx.kind(**ctx.fields).serialize()
    except (ClockError, ValidationError) as e:
        ctx.error = e


# === Assertion Steps ===
@then(parsers.parse('the wire line is "{expected}"'))
def step_wire_line(ctx: WireScenarioContext, expected: str) -> None:
    assert ctx.error is None
    assert ctx.line == expected


@then("serialization fails with a clock error")
def step_clock_error(ctx: WireScenarioContext) -> None:
    assert isinstance(ctx.error, ClockError)
    assert ctx.line is None


@then("construction fails with a validation error")
def step_validation_error(ctx: WireScenarioContext) -> None:
    assert isinstance(ctx.error, ValidationError)
    assert ctx.line is None
