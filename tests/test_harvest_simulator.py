from random import Random

from marketboard.diagnostics import HarvestSimulator
from marketboard.domain.pool import ResourcePool
from marketboard.domain.resources import Resource


def test_simulation_counts_every_harvest():
    result = HarvestSimulator(rng=Random(5)).simulate(harvests=200)
    assert result.harvests == 200
    assert result.rows + result.columns == 200
    assert Resource.VOID not in result.totals
    assert result.average(Resource.COIN) > 0


def test_simulation_with_single_kind_yields_line_lengths():
    simulator = HarvestSimulator(
        lambda rng: ResourcePool({Resource.STONE: 13}, rng=rng),
        rng=Random(2),
    )
    result = simulator.simulate(harvests=50)
    assert result.totals[Resource.STONE] == result.rows * 4 + result.columns * 3


def test_empty_simulation_average_is_zero():
    result = HarvestSimulator(rng=Random(1)).simulate(harvests=0)
    assert result.average(Resource.FAITH) == 0.0
