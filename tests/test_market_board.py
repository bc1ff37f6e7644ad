import json
from pathlib import Path
from random import Random

import pytest

from marketboard import MarketBoard, MarketConfig
from marketboard.domain.cards import Category
from marketboard.domain.decks import TieredDeckSet
from marketboard.domain.exceptions import DeckEmpty
from marketboard.domain.pool import ResourcePool
from marketboard.domain.resources import Resource, ResourcePack
from marketboard.render import deck_set_table, resource_pool_table
from marketboard.testing import CardFactory


@pytest.fixture()
def small_board():
    factory = CardFactory(rng=Random(1))
    decks = TieredDeckSet.from_ordered(
        {Category.BLUE: [list(factory.batch(n, Category.BLUE, level)) for level, n in ((1, 1), (2, 1), (3, 0))]}
    )
    pool = ResourcePool.from_layout(
        [[Resource.COIN] * 4, [Resource.STONE] * 4, [Resource.VOID] * 4],
        Resource.FAITH,
    )
    return MarketBoard(pool, decks)


def test_standard_board_holds_48_cards(standard_board):
    counts = standard_board.cards.counts()
    assert set(counts) == set(Category)
    assert all(levels == (4, 4, 4) for levels in counts.values())
    assert sum(standard_board.resources.tokens().values()) == 13


def test_harvest_delegates_to_pool(small_board):
    assert small_board.harvest_row(-3) == ResourcePack({Resource.COIN: 4})
    assert small_board.resources.spare is Resource.COIN
    assert small_board.harvest_column(9) == ResourcePack({Resource.STONE: 1, Resource.FAITH: 1})


def test_card_operations_delegate_to_decks(small_board):
    card = small_board.peek_card(1, Category.BLUE)
    assert small_board.cost(1, Category.BLUE) == card.cost
    assert small_board.draw_card(1, Category.BLUE) is card
    with pytest.raises(DeckEmpty):
        small_board.cost(1, Category.BLUE)
    assert not small_board.is_exhausted(Category.BLUE)
    assert small_board.discard(Category.BLUE, 1) is False
    assert small_board.is_exhausted(Category.BLUE)


def test_views_render_grid_and_counts(small_board):
    assert small_board.resource_view() == "{\n\tCCCC\n\tSSSS\n\t____\n}"
    assert small_board.card_view() == "{\n\t 0 0 0 0\n\t 0 1 0 0\n\t 0 1 0 0\n}"


def test_rich_tables_have_a_column_per_cell(small_board):
    pool_table = resource_pool_table(small_board.resources)
    assert len(pool_table.columns) == 5
    assert pool_table.row_count == 3
    deck_table = deck_set_table(small_board.cards)
    assert len(deck_table.columns) == 1 + len(Category)


def test_from_config_is_reproducible_with_seed():
    first = MarketBoard.from_config(MarketConfig(rng_seed=9))
    second = MarketBoard.from_config(MarketConfig(rng_seed=9))
    assert first.resources.rows() == second.resources.rows()
    assert first.peek_card(1, Category.GREEN).card_id == second.peek_card(1, Category.GREEN).card_id


def test_from_config_reads_catalog_path(tmp_path: Path):
    payload = {
        "cards": [
            {"id": "only", "category": "yellow", "level": 2, "cost": {"stone": 3}},
        ]
    }
    path = tmp_path / "cards.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    board = MarketBoard.from_config(MarketConfig(catalog_path=path, rng_seed=1))
    assert board.peek_card(2, Category.YELLOW).card_id == "only"
    assert board.is_exhausted(Category.GREEN)


def test_from_config_uses_composition():
    board = MarketBoard.from_config(
        MarketConfig(composition={Resource.SHIELD: 13}, rng_seed=1), cards=[]
    )
    assert board.harvest_row(0) == ResourcePack({Resource.SHIELD: 4})


def test_snapshot_restore_round_trip(standard_board):
    standard_board.harvest_column(2)
    standard_board.draw_card(1, Category.PURPLE)
    standard_board.discard(Category.GREEN, 5)
    snapshot = standard_board.snapshot()

    cards = [card for category in Category for deck in standard_board.cards.decks(category) for card in deck]
    restored = MarketBoard.restore(snapshot, cards)

    assert restored.resources.rows() == standard_board.resources.rows()
    assert restored.resources.spare is standard_board.resources.spare
    assert restored.cards.counts() == standard_board.cards.counts()
    assert restored.peek_card(2, Category.GREEN) is standard_board.peek_card(2, Category.GREEN)


def test_restore_with_unknown_card_raises(standard_board):
    snapshot = standard_board.snapshot()
    with pytest.raises(KeyError):
        MarketBoard.restore(snapshot, [])
