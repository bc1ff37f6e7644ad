"""Development card models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .resources import ResourcePack

LEVELS = (1, 2, 3)


class Category(str, Enum):
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"


@dataclass(frozen=True, slots=True)
class Card:
    """Definition of a purchasable development card.

    The production and victory point fields are carried as-is for callers
    resolving card effects.
    """

    card_id: str
    category: Category
    level: int
    cost: ResourcePack = field(default_factory=ResourcePack)
    victory_points: int = 0
    production_input: ResourcePack = field(default_factory=ResourcePack)
    production_output: ResourcePack = field(default_factory=ResourcePack)

    def __post_init__(self) -> None:
        if self.level not in LEVELS:
            raise ValueError(f"Card {self.card_id} has invalid level {self.level}")
