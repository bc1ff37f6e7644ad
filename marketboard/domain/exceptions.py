"""Exceptions raised by market board domain services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cards import Category


class MarketBoardError(RuntimeError):
    """Base class for domain exceptions."""


class DeckEmpty(MarketBoardError):
    """Raised when the requested deck has no cards left."""

    def __init__(self, level: int, category: "Category") -> None:
        super().__init__(f"No {category.value} cards left at level {level}")
        self.level = level
        self.category = category
