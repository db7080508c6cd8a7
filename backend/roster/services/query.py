"""Filtering and ordering of player collections."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable, Optional

from ..domain import Player
from ..schemas import PlayerOrder, PlayerQuery
from ..time_utils import coerce_utc, to_epoch_millis


def filter_players(players: Iterable[Player], query: PlayerQuery) -> list[Player]:
    """Return the players that pass every filter set on ``query``.

    Text filters match substrings, range bounds are inclusive. Birthday
    bounds are compared as epoch milliseconds, so any integer is accepted.
    Input order is preserved but callers should not rely on it.
    """
    matched: list[Player] = []
    for player in players:
        if query.name is not None and query.name not in player.name:
            continue
        if query.title is not None and query.title not in player.title:
            continue
        if query.race is not None and player.race != query.race:
            continue
        if query.profession is not None and player.profession != query.profession:
            continue
        if query.after is not None or query.before is not None:
            birthday = to_epoch_millis(player.birthday)
            if query.after is not None and birthday < query.after:
                continue
            if query.before is not None and birthday > query.before:
                continue
        if query.banned is not None and player.banned != query.banned:
            continue
        if query.min_experience is not None and player.experience < query.min_experience:
            continue
        if query.max_experience is not None and player.experience > query.max_experience:
            continue
        if query.min_level is not None and player.level < query.min_level:
            continue
        if query.max_level is not None and player.level > query.max_level:
            continue
        matched.append(player)
    return matched


def sort_players(
    players: Iterable[Player], order: Optional[PlayerOrder] = None
) -> list[Player]:
    """Return ``players`` in ascending ``order``; stable for equal keys.

    Without an order the input sequence is returned as is.
    """
    if order is None:
        return list(players)
    if order is PlayerOrder.BIRTHDAY:
        return sorted(players, key=lambda p: coerce_utc(p.birthday))
    return sorted(players, key=attrgetter(order.value))
