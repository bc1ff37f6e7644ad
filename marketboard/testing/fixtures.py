"""Pytest fixtures for market boards."""

from __future__ import annotations

from random import Random

import pytest

from ..config import MarketConfig
from ..domain.market import MarketBoard


@pytest.fixture()
def standard_board() -> MarketBoard:
    return MarketBoard.standard(rng=Random(7))


def board_fixture(seed: int | None = 7, **kwargs) -> MarketBoard:
    """Helper for ad-hoc tests where pytest is not available."""
    config = MarketConfig(rng_seed=seed, **kwargs)
    return MarketBoard.from_config(config)
