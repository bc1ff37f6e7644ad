"""Command line helpers for market boards."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from random import Random

from rich.console import Console

from .config import MarketConfig
from .diagnostics.harvest_simulator import HarvestSimulator
from .domain.market import MarketBoard
from .domain.pool import ResourcePool
from .domain.resources import Resource
from .loaders import load_cards_from_json, validate_catalog_file
from .render import deck_set_table, resource_pool_table
from .validators import validate_cards, validate_config

console = Console()


def run_show() -> None:
    parser = argparse.ArgumentParser(description="Deal and display a market board")
    parser.add_argument("--catalog", help="Path to card catalog JSON file")
    parser.add_argument("--seed", type=int, help="Random seed for the deal")
    args = parser.parse_args()

    config = _load_config()
    if args.catalog:
        config.catalog_path = Path(args.catalog)
    if args.seed is not None:
        config.rng_seed = args.seed

    board = MarketBoard.from_config(config)
    console.print(resource_pool_table(board.resources))
    console.print(deck_set_table(board.cards))


def run_simulate() -> None:
    parser = argparse.ArgumentParser(description="Market board harvest simulator")
    parser.add_argument("--harvests", type=int, default=1000, help="Number of harvests to simulate")
    parser.add_argument("--seed", type=int, help="Random seed")
    args = parser.parse_args()

    config = _load_config()
    seed = args.seed if args.seed is not None else config.rng_seed
    simulator = HarvestSimulator(
        lambda rng: ResourcePool(config.composition, rng=rng),
        rng=Random(seed),
    )
    result = simulator.simulate(harvests=args.harvests)
    console.print(
        f"Simulated {result.harvests} harvests "
        f"({result.rows} rows, {result.columns} columns)."
    )
    for kind in Resource:
        if kind is Resource.VOID:
            continue
        console.print(
            f"  {kind.value}: {result.totals.get(kind, 0)} total, "
            f"{result.average(kind):.2f} per harvest"
        )


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="Market board validator")
    parser.add_argument("--catalog", help="Path to card catalog JSON file for validation")
    args = parser.parse_args()

    config = _load_config()
    errors = validate_config(config)
    catalog = Path(args.catalog) if args.catalog else config.catalog_path
    if catalog is not None:
        catalog_errors = validate_catalog_file(catalog)
        if not catalog_errors:
            catalog_errors = validate_cards(load_cards_from_json(catalog))
        errors.extend(catalog_errors)

    if errors:
        console.print("[red]Configuration errors:[/red]")
        for err in errors:
            console.print(f"- {err}")
        sys.exit(1)
    console.print("Configuration is valid [green]✓[/green]")


def _load_config() -> MarketConfig:
    config = MarketConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return config
