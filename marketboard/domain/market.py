"""Market board combining the resource pool and the card decks."""

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING, Iterable, Sequence

from .cards import Card, Category
from .decks import TieredDeckSet
from .pool import ResourcePool
from .resources import Resource, ResourcePack
from ..loaders.json_loader import load_cards_from_json, load_standard_cards
from ..storage.base import BoardSnapshot

if TYPE_CHECKING:
    from ..config import MarketConfig


class MarketBoard:
    """Shared trading board: a resource pool and a card market.

    Mutating calls (harvests, draws, discards) must be serialised by the
    caller when several players act on the same board.
    """

    def __init__(self, resources: ResourcePool, cards: TieredDeckSet) -> None:
        self.resources = resources
        self.cards = cards

    @classmethod
    def standard(cls, *, rng: Random | None = None) -> "MarketBoard":
        rng = rng or Random()
        return cls(ResourcePool(rng=rng), TieredDeckSet(load_standard_cards(), rng=rng))

    @classmethod
    def from_config(
        cls, config: "MarketConfig", cards: Iterable[Card] | None = None
    ) -> "MarketBoard":
        rng = Random(config.rng_seed) if config.rng_seed is not None else Random()
        if cards is None:
            if config.catalog_path is not None:
                cards = load_cards_from_json(config.catalog_path)
            else:
                cards = load_standard_cards()
        return cls(
            ResourcePool(config.composition, rng=rng),
            TieredDeckSet(cards, rng=rng),
        )

    def harvest_row(self, row: int) -> ResourcePack:
        return self.resources.harvest_row(row)

    def harvest_column(self, column: int) -> ResourcePack:
        return self.resources.harvest_column(column)

    def cost(self, level: int, category: Category) -> ResourcePack:
        return self.cards.peek_cost(level, category)

    def peek_card(self, level: int, category: Category) -> Card:
        return self.cards.peek_card(level, category)

    def draw_card(self, level: int, category: Category) -> Card:
        return self.cards.draw_card(level, category)

    def is_exhausted(self, category: Category) -> bool:
        return self.cards.is_exhausted(category)

    def discard(self, category: Category, amount: int) -> bool:
        return self.cards.discard(category, amount)

    def resource_view(self) -> str:
        from ..render import format_resource_pool

        return format_resource_pool(self.resources)

    def card_view(self) -> str:
        from ..render import format_deck_set

        return format_deck_set(self.cards)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            grid=[[cell.value for cell in row] for row in self.resources.rows()],
            spare=self.resources.spare.value,
            decks={
                category.value: [[card.card_id for card in deck] for deck in self.cards.decks(category)]
                for category in Category
            },
        )

    @classmethod
    def restore(cls, snapshot: BoardSnapshot, cards: Sequence[Card]) -> "MarketBoard":
        """Rebuild a board from a snapshot, resolving card ids against ``cards``."""
        by_id = {card.card_id: card for card in cards}
        pool = ResourcePool.from_layout(
            [[Resource(cell) for cell in row] for row in snapshot.grid],
            Resource(snapshot.spare),
        )
        decks: dict[Category, list[list[Card]]] = {}
        for category_value, levels in snapshot.decks.items():
            try:
                decks[Category(category_value)] = [[by_id[card_id] for card_id in ids] for ids in levels]
            except KeyError as exc:
                raise KeyError(f"Card {exc.args[0]} not found") from exc
        return cls(pool, TieredDeckSet.from_ordered(decks))
