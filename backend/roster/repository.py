"""Storage collaborator for player records."""

from __future__ import annotations

import dataclasses
from typing import Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .domain import Player
from .models import PlayerRow
from .time_utils import coerce_utc

_COLUMNS = [f.name for f in dataclasses.fields(Player) if f.name != "id"]


class PlayerStorage(Protocol):
    async def save(self, player: Player) -> Player: ...

    async def find_by_id(self, player_id: int) -> Optional[Player]: ...

    async def find_all(self) -> Sequence[Player]: ...

    async def delete(self, player: Player) -> None: ...


def _to_player(row: PlayerRow) -> Player:
    values = {name: getattr(row, name) for name in _COLUMNS}
    # SQLite drops the offset on the way back.
    values["birthday"] = coerce_utc(row.birthday)
    return Player(id=row.id, **values)


class SqlPlayerRepository:
    """``PlayerStorage`` backed by a SQLAlchemy async session.

    Every write commits immediately; isolation between concurrent writers
    is whatever the database provides.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, player: Player) -> Player:
        row = None
        if player.id is not None:
            row = await self._session.get(PlayerRow, player.id)
        if row is None:
            row = PlayerRow(id=player.id)
            self._session.add(row)
        for name in _COLUMNS:
            setattr(row, name, getattr(player, name))
        row.birthday = coerce_utc(player.birthday)
        await self._session.flush()
        saved = _to_player(row)
        await self._session.commit()
        return saved

    async def find_by_id(self, player_id: int) -> Optional[Player]:
        row = await self._session.get(PlayerRow, player_id)
        return _to_player(row) if row is not None else None

    async def find_all(self) -> list[Player]:
        rows = (await self._session.execute(select(PlayerRow))).scalars().all()
        return [_to_player(row) for row in rows]

    async def delete(self, player: Player) -> None:
        row = await self._session.get(PlayerRow, player.id)
        if row is not None:
            await self._session.delete(row)
            await self._session.commit()
