"""Validation utilities for market board setups."""

from __future__ import annotations

from typing import Iterable

from .config import MarketConfig
from .domain.cards import LEVELS, Card, Category
from .domain.resources import Resource


def validate_config(config: MarketConfig) -> list[str]:
    """Return list of problems found in the configuration."""
    errors: list[str] = []

    for kind, amount in config.composition.items():
        try:
            Resource(kind)
        except ValueError:
            errors.append(f"Composition references unknown resource '{kind}'.")
            continue
        if amount < 0:
            errors.append(f"Composition amount for '{Resource(kind).value}' cannot be negative.")

    if config.catalog_path is not None and not config.catalog_path.exists():
        errors.append(f"Catalog file '{config.catalog_path}' not found.")

    if config.storage.backend not in ("memory", "sqlalchemy"):
        errors.append(f"Unsupported storage backend '{config.storage.backend}'.")

    return errors


def validate_cards(cards: Iterable[Card]) -> list[str]:
    """Return list of problems found in a set of development cards."""
    errors: list[str] = []
    seen: set[str] = set()
    filled: set[tuple[Category, int]] = set()

    for card in cards:
        if card.card_id in seen:
            errors.append(f"Card id '{card.card_id}' used more than once.")
        seen.add(card.card_id)
        filled.add((card.category, card.level))
        if card.cost.is_empty():
            errors.append(f"Card '{card.card_id}' has no cost.")
        if card.victory_points < 0:
            errors.append(f"Card '{card.card_id}' has negative victory points.")

    for category in Category:
        for level in LEVELS:
            if (category, level) not in filled:
                errors.append(f"No {category.value} cards at level {level}.")

    return errors


__all__ = ["validate_config", "validate_cards"]
