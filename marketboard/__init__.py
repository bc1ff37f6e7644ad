"""MarketBoard public API."""

from .config import MarketConfig, StorageConfig
from .domain import (
    Card,
    Category,
    DeckEmpty,
    MarketBoard,
    Resource,
    ResourcePack,
    ResourcePool,
    TieredDeckSet,
)

__all__ = [
    "MarketConfig",
    "StorageConfig",
    "Card",
    "Category",
    "DeckEmpty",
    "MarketBoard",
    "Resource",
    "ResourcePack",
    "ResourcePool",
    "TieredDeckSet",
]
