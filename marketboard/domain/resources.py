"""Resource tokens and counted packs of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class Resource(str, Enum):
    COIN = "coin"
    STONE = "stone"
    SERVANT = "servant"
    SHIELD = "shield"
    FAITH = "faith"
    VOID = "void"

    @property
    def alias(self) -> str:
        return _ALIASES[self]

    @property
    def is_tradeable(self) -> bool:
        return self not in (Resource.FAITH, Resource.VOID)


_ALIASES = {
    Resource.COIN: "C",
    Resource.STONE: "S",
    Resource.SERVANT: "V",
    Resource.SHIELD: "H",
    Resource.FAITH: "F",
    Resource.VOID: "_",
}


@dataclass(frozen=True, slots=True)
class ResourcePack:
    """Amount of each resource, used for harvests and card costs.

    Packs are immutable and hashable; ``add`` and ``merge`` return new packs.
    ``Resource.VOID`` carries no value and is never stored; zero counts are
    dropped so packs with the same holdings compare equal.
    """

    counts: Mapping[Resource, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        counts: dict[Resource, int] = {}
        for kind, amount in self.counts.items():
            kind = Resource(kind)
            if amount < 0:
                raise ValueError(f"Negative amount {amount} for {kind.value}")
            if kind is Resource.VOID or amount == 0:
                continue
            counts[kind] = counts.get(kind, 0) + int(amount)
        object.__setattr__(self, "counts", MappingProxyType(counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourcePack):
            return NotImplemented
        return dict(self.counts) == dict(other.counts)

    def __hash__(self) -> int:
        return hash(frozenset(self.counts.items()))

    def get(self, kind: Resource) -> int:
        return self.counts.get(kind, 0)

    def add(self, kind: Resource, amount: int = 1) -> "ResourcePack":
        if amount < 0:
            raise ValueError("Cannot add negative amount")
        merged = dict(self.counts)
        merged[kind] = merged.get(kind, 0) + amount
        return ResourcePack(merged)

    def merge(self, other: "ResourcePack") -> "ResourcePack":
        merged = dict(self.counts)
        for kind, amount in other.counts.items():
            merged[kind] = merged.get(kind, 0) + amount
        return ResourcePack(merged)

    def __add__(self, other: "ResourcePack") -> "ResourcePack":
        if not isinstance(other, ResourcePack):
            return NotImplemented
        return self.merge(other)

    def covers(self, other: "ResourcePack") -> bool:
        """True when every amount in ``other`` is available in this pack."""
        return all(self.get(kind) >= amount for kind, amount in other.counts.items())

    def total(self) -> int:
        return sum(self.counts.values())

    def is_empty(self) -> bool:
        return not self.counts

    @property
    def faith(self) -> int:
        return self.get(Resource.FAITH)

    def tradeable(self) -> "ResourcePack":
        return ResourcePack({k: v for k, v in self.counts.items() if k.is_tradeable})

    def items(self) -> Iterator[tuple[Resource, int]]:
        return iter(self.counts.items())

    def to_dict(self) -> dict[str, int]:
        return {kind.value: amount for kind, amount in self.counts.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> "ResourcePack":
        return cls({Resource(str(k)): int(v) for k, v in data.items()})
