"""Loaders for declarative card definitions."""

from .json_loader import (
    load_cards_from_json,
    load_standard_cards,
    parse_catalog_dict,
    validate_catalog_dict,
    validate_catalog_file,
)

__all__ = [
    "load_cards_from_json",
    "load_standard_cards",
    "parse_catalog_dict",
    "validate_catalog_dict",
    "validate_catalog_file",
]
