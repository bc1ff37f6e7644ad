"""Development card decks grouped by category and level."""

from __future__ import annotations

import logging
from collections import deque
from random import Random
from typing import Deque, Iterable, Mapping, Sequence

from .cards import LEVELS, Card, Category
from .exceptions import DeckEmpty
from .resources import ResourcePack

logger = logging.getLogger(__name__)


class TieredDeckSet:
    """Three decks per category, one per level, each drawn from the front.

    Cards are shuffled once when the set is built and never re-ordered.
    """

    def __init__(self, cards: Iterable[Card] = (), *, rng: Random | None = None) -> None:
        self._decks: dict[Category, tuple[Deque[Card], ...]] = {
            category: tuple(deque() for _ in LEVELS) for category in Category
        }
        shuffled = list(cards)
        (rng or Random()).shuffle(shuffled)
        for card in shuffled:
            self._decks[card.category][card.level - 1].append(card)

    @classmethod
    def from_ordered(
        cls, decks: Mapping[Category, Sequence[Sequence[Card]]]
    ) -> "TieredDeckSet":
        """Build a set whose decks keep exactly the given order (head first)."""
        deck_set = cls()
        for category, levels in decks.items():
            if len(levels) != len(LEVELS):
                raise ValueError(f"Category {category.value} needs {len(LEVELS)} decks")
            for index, cards in enumerate(levels):
                for card in cards:
                    if card.category is not category or card.level != index + 1:
                        raise ValueError(
                            f"Card {card.card_id} does not belong to "
                            f"{category.value} level {index + 1}"
                        )
                deck_set._decks[category][index].extend(cards)
        return deck_set

    def peek_cost(self, level: int, category: Category) -> ResourcePack:
        return self.peek_card(level, category).cost

    def peek_card(self, level: int, category: Category) -> Card:
        deck = self._deck(level, category)
        if not deck:
            raise DeckEmpty(level, category)
        return deck[0]

    def draw_card(self, level: int, category: Category) -> Card:
        deck = self._deck(level, category)
        if not deck:
            raise DeckEmpty(level, category)
        card = deck.popleft()
        logger.debug("Drew %s from %s level %s", card.card_id, category.value, level)
        return card

    def is_exhausted(self, category: Category) -> bool:
        return not any(self._decks[category])

    def discard(self, category: Category, amount: int) -> bool:
        """Remove ``amount`` cards of a category, cheapest level first.

        Returns False when the category runs out of cards, True otherwise.
        """
        decks = self._decks[category]
        level = 0
        removed = 0
        while removed < amount:
            if decks[level]:
                decks[level].popleft()
                removed += 1
                continue
            # An empty level costs nothing; move up and try again.
            level += 1
            if level == len(LEVELS):
                logger.debug("Discard of %s %s cards ran out after %s", amount, category.value, removed)
                return False
        logger.debug("Discarded %s %s cards", removed, category.value)
        return not self.is_exhausted(category)

    def remaining(self, category: Category, level: int) -> int:
        return len(self._deck(level, category))

    def counts(self) -> dict[Category, tuple[int, ...]]:
        return {
            category: tuple(len(deck) for deck in decks)
            for category, decks in self._decks.items()
        }

    def decks(self, category: Category) -> tuple[tuple[Card, ...], ...]:
        """Current contents of each level deck, head first."""
        return tuple(tuple(deck) for deck in self._decks[category])

    def _deck(self, level: int, category: Category) -> Deque[Card]:
        if level not in LEVELS:
            raise ValueError(f"Level must be one of {LEVELS}, got {level}")
        return self._decks[category][level - 1]
