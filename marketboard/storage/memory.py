"""In-memory snapshot storage."""

from __future__ import annotations

import logging

from .base import BoardSnapshot, SnapshotStore

logger = logging.getLogger(__name__)


class InMemorySnapshotStore(SnapshotStore):
    def __init__(self) -> None:
        self._snapshots: dict[str, dict] = {}

    async def save(self, game_id: str, snapshot: BoardSnapshot) -> None:
        # Stored as plain data so later board changes never leak in.
        self._snapshots[game_id] = snapshot.to_dict()
        logger.debug("Saved snapshot for game %s", game_id)

    async def load(self, game_id: str) -> BoardSnapshot | None:
        data = self._snapshots.get(game_id)
        return BoardSnapshot.from_dict(data) if data is not None else None

    async def delete(self, game_id: str) -> None:
        self._snapshots.pop(game_id, None)

    def game_ids(self) -> list[str]:
        return list(self._snapshots)
