"""Player operations: create, read, partial update, delete and listing."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .. import db
from ..domain import Player
from ..exceptions import InvalidArgument, PlayerNotFound
from ..repository import PlayerStorage, SqlPlayerRepository
from ..schemas import PlayerCreate, PlayerOrder, PlayerQuery, PlayerUpdate
from .merge import merge_player_update
from .pagination import paginate
from .query import filter_players, sort_players
from .stats import derive_stats
from .validation import is_player_valid

logger = logging.getLogger(__name__)


class PlayerService:
    """Applies the player rules on top of a storage collaborator.

    Stateless apart from ``storage``. No locking is done here: callers must
    not run two updates of the same player at once unless the storage
    isolates them.
    """

    def __init__(self, storage: PlayerStorage) -> None:
        self.storage = storage

    async def create_player(self, data: PlayerCreate) -> Player:
        player = Player(
            name=data.name,
            title=data.title,
            race=data.race,
            profession=data.profession,
            experience=data.experience,
            level=0,
            until_next_level=0,
            birthday=data.birthday,
            banned=data.banned,
        )
        if not is_player_valid(player):
            raise InvalidArgument("player data is invalid")
        player.level, player.until_next_level = derive_stats(player.experience)
        saved = await self.storage.save(player)
        logger.info("Created player %s (%r)", saved.id, saved.name)
        return saved

    async def get_player(self, player_id: int) -> Player:
        if isinstance(player_id, bool) or not isinstance(player_id, int) or player_id <= 0:
            raise InvalidArgument(f"player id must be a positive integer, got {player_id!r}")
        player = await self.storage.find_by_id(player_id)
        if player is None:
            raise PlayerNotFound(player_id)
        return player

    async def update_player(self, player_id: int, update: PlayerUpdate) -> Player:
        existing = await self.get_player(player_id)
        try:
            merged = merge_player_update(existing, update)
        except InvalidArgument as exc:
            logger.warning("Rejected update of player %s: %s", player_id, exc.detail)
            raise
        saved = await self.storage.save(merged)
        logger.info(
            "Updated player %s (fields: %s)",
            player_id,
            ", ".join(sorted(update.model_fields_set)) or "none",
        )
        return saved

    async def delete_player(self, player_id: int) -> None:
        player = await self.get_player(player_id)
        await self.storage.delete(player)
        logger.info("Deleted player %s", player_id)

    async def list_players(
        self,
        query: PlayerQuery,
        order: Optional[PlayerOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> list[Player]:
        matched = filter_players(await self.storage.find_all(), query)
        return paginate(sort_players(matched, order), page_number, page_size)

    async def count_players(self, query: PlayerQuery) -> int:
        return len(filter_players(await self.storage.find_all(), query))


@asynccontextmanager
async def player_service_scope() -> AsyncIterator[PlayerService]:
    """Yield a ``PlayerService`` backed by a fresh database session."""

    async with db.session_scope() as session:
        yield PlayerService(SqlPlayerRepository(session))
