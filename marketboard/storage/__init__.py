"""Storage backends for market board snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BoardSnapshot, SnapshotStore
from .memory import InMemorySnapshotStore
from .sqlalchemy import AsyncSQLAlchemySnapshotStore

if TYPE_CHECKING:
    from ..config import StorageConfig


def build_snapshot_store(config: StorageConfig) -> SnapshotStore:
    if config.backend == "memory":
        return InMemorySnapshotStore()
    if config.backend == "sqlalchemy":
        dsn = config.resolve_dsn()
        if not dsn:
            raise ValueError("SQLAlchemy backend requires a DSN")
        return AsyncSQLAlchemySnapshotStore(dsn, echo=config.echo_sql)
    raise ValueError(f"Unsupported storage backend {config.backend}")


__all__ = [
    "BoardSnapshot",
    "SnapshotStore",
    "InMemorySnapshotStore",
    "AsyncSQLAlchemySnapshotStore",
    "build_snapshot_store",
]
