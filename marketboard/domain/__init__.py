"""Domain models and services."""

from .resources import Resource, ResourcePack
from .pool import ResourcePool, STANDARD_COMPOSITION
from .cards import Card, Category, LEVELS
from .decks import TieredDeckSet
from .exceptions import DeckEmpty, MarketBoardError
from .market import MarketBoard

__all__ = [
    "Resource",
    "ResourcePack",
    "ResourcePool",
    "STANDARD_COMPOSITION",
    "Card",
    "Category",
    "LEVELS",
    "TieredDeckSet",
    "DeckEmpty",
    "MarketBoardError",
    "MarketBoard",
]
