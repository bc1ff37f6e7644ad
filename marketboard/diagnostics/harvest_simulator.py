"""Harvest simulation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Callable, Dict

from ..domain.pool import COLUMNS, ROWS, ResourcePool
from ..domain.resources import Resource, ResourcePack


@dataclass(slots=True)
class SimulationResult:
    harvests: int
    rows: int = 0
    columns: int = 0
    totals: Dict[Resource, int] = field(default_factory=dict)

    def merge(self, pack: ResourcePack) -> None:
        for kind, amount in pack.items():
            self.totals[kind] = self.totals.get(kind, 0) + amount

    def average(self, kind: Resource) -> float:
        if not self.harvests:
            return 0.0
        return self.totals.get(kind, 0) / self.harvests


class HarvestSimulator:
    """Monte-Carlo simulation of random row and column harvests."""

    def __init__(
        self,
        pool_factory: Callable[[Random], ResourcePool] | None = None,
        *,
        rng: Random | None = None,
    ) -> None:
        self._pool_factory = pool_factory or (lambda rng: ResourcePool(rng=rng))
        self._rng = rng or Random()

    def simulate(self, *, harvests: int = 1000) -> SimulationResult:
        pool = self._pool_factory(self._rng)
        expected = pool.tokens()
        result = SimulationResult(harvests=harvests)
        for step in range(harvests):
            # Rows and columns are picked in proportion to how many exist.
            line = self._rng.randrange(ROWS + COLUMNS)
            if line < ROWS:
                pack = pool.harvest_row(line)
                result.rows += 1
            else:
                pack = pool.harvest_column(line - ROWS)
                result.columns += 1
            result.merge(pack)
            if pool.tokens() != expected:
                raise RuntimeError(f"Token count changed after harvest {step + 1}")
        return result
