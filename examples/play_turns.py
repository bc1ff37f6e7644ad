"""Plays a few scripted turns against a standard market board."""

from __future__ import annotations

import asyncio
import logging
from random import Random

from rich.console import Console

from marketboard import Category, DeckEmpty, MarketBoard, MarketConfig, ResourcePack
from marketboard.render import deck_set_table, resource_pool_table
from marketboard.storage import build_snapshot_store

console = Console()


def take_turns(board: MarketBoard, rng: Random, turns: int = 8) -> ResourcePack:
    """Harvest random lines and buy the cheapest affordable card each turn."""
    holdings = ResourcePack()
    for turn in range(1, turns + 1):
        if rng.random() < 0.5:
            gained = board.harvest_row(rng.randint(0, 2))
        else:
            gained = board.harvest_column(rng.randint(0, 3))
        holdings = holdings + gained.tradeable()
        console.print(f"Turn {turn}: gained {gained.to_dict()}")

        for category in Category:
            try:
                cost = board.cost(1, category)
            except DeckEmpty:
                continue
            if holdings.covers(cost):
                card = board.draw_card(1, category)
                holdings = ResourcePack(
                    {kind: amount - cost.get(kind) for kind, amount in holdings.items()}
                )
                console.print(f"  bought {card.card_id} for {cost.to_dict()}")
                break

    # A hazard token removes two green cards at the end of the round.
    if not board.discard(Category.GREEN, 2):
        console.print("Green cards are sold out.")
    return holdings


async def main() -> None:
    config = MarketConfig.from_env()
    logging.basicConfig(level=config.log_level)
    board = MarketBoard.from_config(config)
    holdings = take_turns(board, Random(config.rng_seed))

    console.print(resource_pool_table(board.resources))
    console.print(deck_set_table(board.cards))
    console.print(f"Left in hand: {holdings.to_dict()}")

    store = build_snapshot_store(config.storage)
    init_models = getattr(store, "init_models", None)
    if init_models is not None:
        await init_models()
    await store.save("example", board.snapshot())


if __name__ == "__main__":
    asyncio.run(main())
