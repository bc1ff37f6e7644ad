"""Storage abstractions for saved market boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(slots=True)
class BoardSnapshot:
    """Serialisable state of a market board.

    Resources are stored by enum value and cards by id, head of each deck
    first.
    """

    grid: list[list[str]]
    spare: str
    decks: dict[str, list[list[str]]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "spare": self.spare,
            "decks": {category: [list(ids) for ids in levels] for category, levels in self.decks.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoardSnapshot":
        return cls(
            grid=[list(map(str, row)) for row in data["grid"]],
            spare=str(data["spare"]),
            decks={
                str(category): [list(map(str, ids)) for ids in levels]
                for category, levels in data.get("decks", {}).items()
            },
        )


class SnapshotStore(Protocol):
    async def save(self, game_id: str, snapshot: BoardSnapshot) -> None:
        ...

    async def load(self, game_id: str) -> BoardSnapshot | None:
        ...

    async def delete(self, game_id: str) -> None:
        ...
