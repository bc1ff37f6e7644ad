"""SQLAlchemy snapshot storage."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator

from sqlalchemy import JSON, DateTime, String, delete, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .base import BoardSnapshot, SnapshotStore

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class SnapshotTable(Base):
    __tablename__ = "marketboard_snapshots"

    game_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    grid: Mapped[list] = mapped_column(JSON)
    spare: Mapped[str] = mapped_column(String(16))
    decks: Mapped[dict] = mapped_column(JSON, default=dict)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))


class AsyncSQLAlchemySnapshotStore(SnapshotStore):
    """Snapshot store backed by an async SQLAlchemy engine."""

    def __init__(self, dsn: str, *, echo: bool = False) -> None:
        self._engine = create_async_engine(dsn, echo=echo, future=True)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def init_models(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()

    async def save(self, game_id: str, snapshot: BoardSnapshot) -> None:
        data = snapshot.to_dict()
        now = datetime.now(timezone.utc)
        async with self.session() as session:
            stmt = update(SnapshotTable).where(SnapshotTable.game_id == game_id).values(
                grid=data["grid"],
                spare=data["spare"],
                decks=data["decks"],
                updated_at=now,
            )
            result = await session.execute(stmt)
            if result.rowcount == 0:
                session.add(
                    SnapshotTable(
                        game_id=game_id,
                        grid=data["grid"],
                        spare=data["spare"],
                        decks=data["decks"],
                        updated_at=now,
                    )
                )
            await session.commit()
        logger.debug("Saved snapshot for game %s", game_id)

    async def load(self, game_id: str) -> BoardSnapshot | None:
        async with self.session() as session:
            row = await session.get(SnapshotTable, game_id)
            if row is None:
                return None
            return BoardSnapshot.from_dict(
                {"grid": row.grid, "spare": row.spare, "decks": row.decks or {}}
            )

    async def delete(self, game_id: str) -> None:
        async with self.session() as session:
            await session.execute(delete(SnapshotTable).where(SnapshotTable.game_id == game_id))
            await session.commit()
