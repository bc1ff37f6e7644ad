"""Testing utilities for market boards."""

from .factory import CardFactory
from .fixtures import board_fixture, standard_board

__all__ = [
    "CardFactory",
    "board_fixture",
    "standard_board",
]
