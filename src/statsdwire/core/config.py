"""Default hostname and constant tags applied to outgoing primitives.

Defaults are passed explicitly. ``WireDefaults.from_env`` reads the standard
Datadog environment variables through ``DatadogEnvSettings`` for callers that
configure through the process environment.
"""

from dataclasses import dataclass, field, replace
from typing import Annotated, TypeVar

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from statsdwire.core.models import Event, Metric, ServiceCheck
from statsdwire.core.tags import TagMap, TagPair

P = TypeVar("P", Metric, Event, ServiceCheck)


class DatadogEnvSettings(BaseSettings):
    """Datadog agent environment variables (``DD_*``)."""

    model_config = SettingsConfigDict(env_prefix="DD_")

    hostname: str | None = None
    # DD_TAGS is a comma or whitespace separated list, not JSON
    tags: Annotated[list[TagPair], NoDecode] = []
    env: str | None = None
    service: str | None = None
    version: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: object) -> object:
        """Split ``key[:value]`` entries; empty entries are skipped."""
        if not isinstance(value, str):
            return value
        pairs: list[TagPair] = []
        for entry in value.replace(",", " ").split():
            key, sep, tag_value = entry.partition(":")
            pairs.append((key, tag_value if sep else None))
        return pairs

    def service_tags(self) -> list[TagPair]:
        """Unified service tags in env, service, version order, skipping unset ones."""
        return [
            (name, value)
            for name, value in (
                ("env", self.env),
                ("service", self.service),
                ("version", self.version),
            )
            if value
        ]


@dataclass(frozen=True)
class WireDefaults:
    """Defaults merged into primitives before encoding.

    Attributes:
        hostname: Hostname for events and service checks that carry none.
        constant_tags: Tags appended after each primitive's own tags.
    """

    hostname: str | None = None
    constant_tags: TagMap = field(default_factory=TagMap)

    def __post_init__(self) -> None:
        object.__setattr__(self, "constant_tags", TagMap.of(self.constant_tags))

    @classmethod
    def from_env(cls) -> "WireDefaults":
        """Build defaults from Datadog environment variables.

        Returns:
            WireDefaults with hostname from DD_HOSTNAME and constant tags from
            DD_TAGS followed by env, service and version tags.
        """
        settings = DatadogEnvSettings()
        return cls(
            hostname=settings.hostname or None,
            constant_tags=TagMap(tuple(settings.tags + settings.service_tags())),
        )


def apply_defaults(primitive: P, defaults: WireDefaults) -> P:
    """Return a copy of primitive with defaults merged in.

    Constant tags are appended after the primitive's own tags. Events and
    service checks without a hostname receive the default hostname. The
    input primitive is not modified.

    Args:
        primitive: Metric, Event or ServiceCheck.
        defaults: Defaults to merge.

    Returns:
        A new primitive of the same type.
    """
    changes: dict[str, object] = {}
    if len(defaults.constant_tags):
        own = primitive.tags if primitive.tags is not None else TagMap()
        changes["tags"] = own.extend(defaults.constant_tags)
    if (
        not isinstance(primitive, Metric)
        and primitive.hostname is None
        and defaults.hostname is not None
    ):
        changes["hostname"] = defaults.hostname
    if not changes:
        return primitive
    return replace(primitive, **changes)
