"""Text and rich renderings of the market board for display and debugging."""

from __future__ import annotations

from rich.table import Table

from .domain.cards import LEVELS, Category
from .domain.decks import TieredDeckSet
from .domain.pool import ResourcePool
from .domain.resources import Resource

_STYLES = {
    Resource.COIN: "yellow",
    Resource.STONE: "grey62",
    Resource.SERVANT: "magenta",
    Resource.SHIELD: "blue",
    Resource.FAITH: "red",
    Resource.VOID: "white",
}


def format_resource_pool(pool: ResourcePool) -> str:
    lines = ["{"]
    for row in pool.rows():
        lines.append("\t" + "".join(cell.alias for cell in row))
    lines.append("}")
    return "\n".join(lines)


def format_deck_set(decks: TieredDeckSet) -> str:
    """Remaining cards per level (highest first), one column per category."""
    counts = decks.counts()
    lines = ["{"]
    for level in reversed(LEVELS):
        lines.append("\t" + "".join(f" {counts[category][level - 1]}" for category in Category))
    lines.append("}")
    return "\n".join(lines)


def resource_pool_table(pool: ResourcePool) -> Table:
    table = Table(title="Resources", show_header=True, header_style="bold")
    table.add_column("Row")
    for column in range(len(pool.row(0))):
        table.add_column(str(column), justify="center")
    for index, row in enumerate(pool.rows()):
        table.add_row(
            str(index),
            *(f"[{_STYLES[cell]}]{cell.value}[/{_STYLES[cell]}]" for cell in row),
        )
    table.caption = f"spare: {pool.spare.value}"
    return table


def deck_set_table(decks: TieredDeckSet) -> Table:
    counts = decks.counts()
    table = Table(title="Development cards", show_header=True, header_style="bold")
    table.add_column("Level")
    for category in Category:
        table.add_column(category.value.title(), justify="right", style=category.value)
    for level in reversed(LEVELS):
        table.add_row(str(level), *(str(counts[category][level - 1]) for category in Category))
    return table


__all__ = [
    "format_resource_pool",
    "format_deck_set",
    "resource_pool_table",
    "deck_set_table",
]
