"""Configuration models for market boards."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping

from .domain.pool import STANDARD_COMPOSITION
from .domain.resources import Resource


StorageBackend = Literal["memory", "sqlalchemy"]


@dataclass(slots=True)
class StorageConfig:
    """Configure where board snapshots are kept."""

    backend: StorageBackend = "memory"
    dsn: str | None = None
    echo_sql: bool = False

    def resolve_dsn(self) -> str | None:
        if self.dsn:
            return self.dsn
        if self.backend == "sqlalchemy":
            return "sqlite+aiosqlite:///./marketboard.db"
        return None


@dataclass(slots=True)
class MarketConfig:
    """Top-level configuration container."""

    composition: Mapping[Resource, int] = field(default_factory=lambda: dict(STANDARD_COMPOSITION))
    catalog_path: Path | None = None
    rng_seed: int | None = None
    log_level: str = "WARNING"
    storage: StorageConfig = field(default_factory=StorageConfig)

    @classmethod
    def from_env(cls) -> "MarketConfig":
        """Create config from environment variables prefixed with MARKETBOARD_."""
        prefix = "MARKETBOARD_"
        storage = StorageConfig(
            backend=os.getenv(f"{prefix}STORAGE_BACKEND", "memory"),
            dsn=os.getenv(f"{prefix}STORAGE_DSN"),
            echo_sql=os.getenv(f"{prefix}STORAGE_ECHO_SQL", "false").lower() in {"1", "true", "yes"},
        )
        catalog = os.getenv(f"{prefix}CATALOG_PATH")
        composition = _parse_composition(os.getenv(f"{prefix}COMPOSITION"))
        return cls(
            composition=composition or dict(STANDARD_COMPOSITION),
            catalog_path=Path(catalog) if catalog else None,
            rng_seed=(
                int(os.getenv(f"{prefix}RNG_SEED")) if os.getenv(f"{prefix}RNG_SEED") else None
            ),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", "WARNING").upper(),
            storage=storage,
        )


def _parse_composition(raw: str | None) -> dict[Resource, int]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON for MARKETBOARD_COMPOSITION") from exc
    if not isinstance(data, dict):
        raise ValueError("MARKETBOARD_COMPOSITION must be a JSON object")
    try:
        return {Resource(str(k)): int(v) for k, v in data.items()}
    except ValueError as exc:
        raise ValueError(f"Invalid MARKETBOARD_COMPOSITION: {exc}") from exc
