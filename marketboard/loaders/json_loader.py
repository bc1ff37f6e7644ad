"""Load development cards from JSON definitions."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterable

from ..domain.cards import LEVELS, Card, Category
from ..domain.resources import Resource, ResourcePack

logger = logging.getLogger(__name__)

STANDARD_CATALOG = "development_cards.json"


def load_cards_from_json(path: str | Path) -> list[Card]:
    """Read and validate a card catalog file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    cards = list(parse_catalog_dict(data))
    logger.info("Loaded %s development cards from %s", len(cards), path)
    return cards


def load_standard_cards() -> list[Card]:
    """Return the 48 development cards shipped with the package."""
    raw = resources.files("marketboard.data").joinpath(STANDARD_CATALOG).read_text(encoding="utf-8")
    return list(parse_catalog_dict(json.loads(raw)))


def parse_catalog_dict(data: dict[str, Any]) -> tuple[Card, ...]:
    """Parse a JSON dict (already decoded) into cards."""
    errors = validate_catalog_dict(data)
    if errors:
        raise ValueError(_format_errors("Catalog validation failed", errors))
    return tuple(parse_card(entry) for entry in data["cards"])


def parse_card(entry: dict[str, Any]) -> Card:
    production = entry.get("production", {})
    return Card(
        card_id=entry["id"],
        category=Category(entry["category"]),
        level=int(entry["level"]),
        cost=ResourcePack.from_dict(entry.get("cost", {})),
        victory_points=int(entry.get("victoryPoints", 0)),
        production_input=ResourcePack.from_dict(production.get("input", {})),
        production_output=ResourcePack.from_dict(production.get("output", {})),
    )


def validate_catalog_file(path: str | Path) -> list[str]:
    """Validate catalog JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_catalog_dict(data)


def validate_catalog_dict(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    cards_raw = data.get("cards") if isinstance(data, dict) else None
    if not isinstance(cards_raw, list) or not cards_raw:
        return ["Catalog must contain non-empty 'cards' array."]

    card_ids: set[str] = set()
    for idx, entry in enumerate(cards_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Card #{idx} must be an object.")
            continue
        card_id = entry.get("id")
        if not isinstance(card_id, str) or not card_id.strip():
            errors.append(f"Card #{idx} must define non-empty 'id'.")
            continue
        if card_id in card_ids:
            errors.append(f"Card id '{card_id}' defined multiple times.")
        card_ids.add(card_id)

        category = entry.get("category")
        try:
            Category(category)
        except ValueError:
            errors.append(f"Card '{card_id}' has invalid category '{category}'.")

        level = entry.get("level")
        if not isinstance(level, int) or isinstance(level, bool) or level not in LEVELS:
            errors.append(f"Card '{card_id}' has invalid level '{level}'.")

        points = entry.get("victoryPoints", 0)
        if not isinstance(points, int) or isinstance(points, bool) or points < 0:
            errors.append(f"Card '{card_id}' has invalid 'victoryPoints' value '{points}'.")

        if "cost" not in entry:
            errors.append(f"Card '{card_id}' must define 'cost' object.")
        else:
            errors.extend(_validate_pack(entry["cost"], f"Card '{card_id}' cost"))

        production = entry.get("production")
        if production is not None:
            if not isinstance(production, dict):
                errors.append(f"Card '{card_id}' production must be an object.")
            else:
                for side in ("input", "output"):
                    if side in production:
                        errors.extend(
                            _validate_pack(production[side], f"Card '{card_id}' production {side}")
                        )

    return errors


def _validate_pack(raw: Any, label: str) -> list[str]:
    if not isinstance(raw, dict):
        return [f"{label} must be an object."]
    errors: list[str] = []
    for code, amount in raw.items():
        try:
            kind = Resource(code)
        except ValueError:
            errors.append(f"{label} references unknown resource '{code}'.")
            continue
        if kind is Resource.VOID:
            errors.append(f"{label} cannot contain '{kind.value}'.")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            errors.append(f"{label} amount for '{code}' must be non-negative integer.")
    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
