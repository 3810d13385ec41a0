"""Value objects describing recommendation backends."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelDescriptor:
    """A configured recommendation backend. Immutable for the process lifetime."""

    key: str
    label: str
    base_url: str
    supports_online_learning: bool = False


@dataclass(frozen=True)
class ModelInfo:
    """Read view of a descriptor plus whether it was active at read time."""

    key: str
    label: str
    base_url: str
    supports_online_learning: bool
    active: bool

    @classmethod
    def from_descriptor(cls, descriptor: ModelDescriptor, active: bool) -> "ModelInfo":
        return cls(
            key=descriptor.key,
            label=descriptor.label,
            base_url=descriptor.base_url,
            supports_online_learning=descriptor.supports_online_learning,
            active=active,
        )


@dataclass(frozen=True)
class RecommendationItem:
    """A single backend result before hydration into a catalog book."""

    book_id: int
    score: float | None = None
    title: str | None = None
    author: str | None = None
