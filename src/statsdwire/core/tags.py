"""Ordered tag map and its wire formatting."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

TagPair = tuple[str, str | None]


@dataclass(frozen=True)
class TagMap:
    """An ordered sequence of tag keys with optional values.

    Keys are not deduplicated and insertion order is kept, since both are
    visible in the rendered output.

    Attributes:
        pairs: (key, value) tuples; a value of None renders the bare key.
    """

    pairs: tuple[TagPair, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.pairs, str):
            raise TypeError("tag pairs must be (key, value) tuples, not a str")
        object.__setattr__(
            self, "pairs", tuple((str(k), v) for k, v in self.pairs)
        )

    @classmethod
    def of(
        cls, tags: "TagMap | Mapping[str, str | None] | Iterable[TagPair]"
    ) -> "TagMap":
        """Build a TagMap from a mapping, an iterable of pairs, or a TagMap.

        Args:
            tags: Source tags. Mappings keep their iteration order.

        Returns:
            A TagMap owning its own copy of the pairs.

        Raises:
            TypeError: If tags is a str. A tag line such as ``"a,b:c"`` is
                not parsed.
        """
        if isinstance(tags, TagMap):
            return tags
        if isinstance(tags, str):
            raise TypeError(
                "tags must be a mapping or (key, value) pairs, not a str"
            )
        if isinstance(tags, Mapping):
            return cls(tuple((str(k), v) for k, v in tags.items()))
        return cls(tuple((str(k), v) for k, v in tags))

    def __iter__(self) -> Iterator[TagPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def extend(self, other: "TagMap") -> "TagMap":
        """Return a new TagMap with other's pairs appended after this one's."""
        return TagMap(self.pairs + other.pairs)

    def format(self) -> str:
        """Render as ``k1,k2:v2,...``."""
        return format_tags(self)


TagsLike = TagMap | Mapping[str, str | None] | Iterable[TagPair]


def format_tags(tags: Iterable[TagPair]) -> str:
    """Format tags as comma-separated ``key`` or ``key:value`` entries.

    No escaping is applied; keys and values containing ``,``, ``:`` or ``|``
    produce malformed lines.

    Args:
        tags: Ordered (key, value) pairs.

    Returns:
        The joined tag string, or an empty string when there are no tags.
    """
    parts = []
    for key, value in tags:
        if value is None:
            parts.append(key)
        else:
            parts.append(f"{key}:{value}")
    return ",".join(parts)
