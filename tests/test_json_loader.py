import json
from pathlib import Path

import pytest

from marketboard.domain.cards import Category
from marketboard.domain.resources import Resource, ResourcePack
from marketboard.loaders import (
    load_cards_from_json,
    load_standard_cards,
    parse_catalog_dict,
    validate_catalog_dict,
)


def test_parse_catalog_dict_reads_production():
    data = {
        "cards": [
            {
                "id": "smith",
                "category": "green",
                "level": 1,
                "victoryPoints": 2,
                "cost": {"shield": 2},
                "production": {"input": {"coin": 1}, "output": {"faith": 1}},
            }
        ]
    }
    (card,) = parse_catalog_dict(data)
    assert card.category is Category.GREEN
    assert card.level == 1
    assert card.victory_points == 2
    assert card.cost == ResourcePack({Resource.SHIELD: 2})
    assert card.production_input == ResourcePack({Resource.COIN: 1})
    assert card.production_output.faith == 1


def test_parse_catalog_dict_invalid_level_raises():
    data = {"cards": [{"id": "faulty", "category": "blue", "level": 4, "cost": {}}]}
    with pytest.raises(ValueError) as exc_info:
        parse_catalog_dict(data)
    assert "invalid level" in str(exc_info.value)


def test_validate_catalog_dict_reports_every_problem():
    data = {
        "cards": [
            {"id": "a", "category": "orange", "level": 1, "cost": {"coin": 1}},
            {"id": "a", "category": "blue", "level": 2, "cost": {"gold": 1}},
            {"id": "b", "category": "blue", "level": 2, "cost": {"void": 1, "coin": -2}},
            {"id": "c", "category": "blue", "level": 3},
        ]
    }
    errors = validate_catalog_dict(data)
    assert any("invalid category 'orange'" in err for err in errors)
    assert any("defined multiple times" in err for err in errors)
    assert any("unknown resource 'gold'" in err for err in errors)
    assert any("cannot contain 'void'" in err for err in errors)
    assert any("non-negative integer" in err for err in errors)
    assert any("must define 'cost'" in err for err in errors)


def test_validate_catalog_dict_rejects_boolean_points():
    data = {
        "cards": [
            {"id": "g1", "category": "green", "level": 1, "cost": {"coin": 1}, "victoryPoints": True},
        ]
    }
    errors = validate_catalog_dict(data)
    assert errors == ["Card 'g1' has invalid 'victoryPoints' value 'True'."]


def test_validate_catalog_dict_requires_cards():
    assert validate_catalog_dict({}) == ["Catalog must contain non-empty 'cards' array."]


def test_load_cards_from_json(tmp_path: Path):
    payload = {
        "cards": [
            {"id": "scholar", "category": "purple", "level": 3, "cost": {"servant": 6}},
        ]
    }
    json_path = tmp_path / "cards.json"
    json_path.write_text(json.dumps(payload), encoding="utf-8")

    cards = load_cards_from_json(json_path)
    assert [card.card_id for card in cards] == ["scholar"]


def test_standard_catalog_fills_every_deck():
    cards = load_standard_cards()
    assert len(cards) == 48
    for category in Category:
        for level in (1, 2, 3):
            assert sum(1 for c in cards if c.category is category and c.level == level) == 4
