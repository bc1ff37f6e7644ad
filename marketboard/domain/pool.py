"""Resource grid harvested by rows and columns."""

from __future__ import annotations

import logging
from collections import Counter
from random import Random
from typing import Mapping, Sequence

from .resources import Resource, ResourcePack

logger = logging.getLogger(__name__)

ROWS = 3
COLUMNS = 4
CELLS = ROWS * COLUMNS + 1

STANDARD_COMPOSITION: Mapping[Resource, int] = {
    Resource.COIN: 2,
    Resource.STONE: 2,
    Resource.SERVANT: 2,
    Resource.SHIELD: 2,
    Resource.FAITH: 1,
    Resource.VOID: 4,
}


class ResourcePool:
    """A 3x4 grid of resource tokens plus one spare token.

    Taking a line pushes the spare in at the high-index end and ejects the
    low-index token into the spare slot. The 13 tokens are dealt once and
    only ever permuted afterwards.
    """

    def __init__(
        self,
        composition: Mapping[Resource, int] | None = None,
        *,
        rng: Random | None = None,
    ) -> None:
        rng = rng or Random()
        tokens: list[Resource] = []
        for kind, amount in (composition or STANDARD_COMPOSITION).items():
            if amount < 0:
                raise ValueError(f"Negative amount {amount} for {Resource(kind).value}")
            tokens.extend([Resource(kind)] * amount)
        rng.shuffle(tokens)
        # Short compositions are padded with empty tokens, extras are ignored.
        tokens = (tokens + [Resource.VOID] * CELLS)[:CELLS]
        self._grid = [tokens[r * COLUMNS:(r + 1) * COLUMNS] for r in range(ROWS)]
        self._spare = tokens[-1]

    @classmethod
    def from_layout(
        cls, grid: Sequence[Sequence[Resource]], spare: Resource
    ) -> "ResourcePool":
        """Build a pool with a known layout instead of a random deal."""
        if len(grid) != ROWS or any(len(row) != COLUMNS for row in grid):
            raise ValueError(f"Grid must be {ROWS}x{COLUMNS}")
        pool = cls.__new__(cls)
        pool._grid = [[Resource(cell) for cell in row] for row in grid]
        pool._spare = Resource(spare)
        return pool

    @property
    def spare(self) -> Resource:
        return self._spare

    def rows(self) -> tuple[tuple[Resource, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def row(self, row: int) -> tuple[Resource, ...]:
        return tuple(self._grid[row])

    def column(self, column: int) -> tuple[Resource, ...]:
        return tuple(self._grid[r][column] for r in range(ROWS))

    def tokens(self) -> Counter[Resource]:
        counter: Counter[Resource] = Counter([self._spare])
        for row in self._grid:
            counter.update(row)
        return counter

    def harvest_row(self, row: int) -> ResourcePack:
        row = min(max(row, 0), ROWS - 1)
        pack = ResourcePack()
        for column in range(COLUMNS - 1, -1, -1):
            taken = self._grid[row][column]
            pack = pack.add(taken)
            self._grid[row][column] = self._spare
            self._spare = taken
        logger.debug("Harvested row %s: %s, spare now %s", row, pack.to_dict(), self._spare.value)
        return pack

    def harvest_column(self, column: int) -> ResourcePack:
        column = min(max(column, 0), COLUMNS - 1)
        pack = ResourcePack()
        for row in range(ROWS - 1, -1, -1):
            taken = self._grid[row][column]
            pack = pack.add(taken)
            self._grid[row][column] = self._spare
            self._spare = taken
        logger.debug(
            "Harvested column %s: %s, spare now %s", column, pack.to_dict(), self._spare.value
        )
        return pack
