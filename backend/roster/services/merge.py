"""Apply a partial update onto an existing player record."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

from ..domain import Player
from ..exceptions import InvalidArgument
from ..schemas import PlayerUpdate
from .stats import derive_stats
from .validation import (
    is_birthday_valid,
    is_experience_valid,
    is_name_valid,
    is_title_valid,
)

# Order matters: the first invalid field is the one reported.
_MERGE_FIELDS: list[tuple[str, Callable[[Any], bool] | None]] = [
    ("name", is_name_valid),
    ("title", is_title_valid),
    ("race", None),
    ("profession", None),
    ("experience", is_experience_valid),
    ("birthday", is_birthday_valid),
    ("banned", None),
]


def merge_player_update(player: Player, update: PlayerUpdate) -> Player:
    """Return a copy of ``player`` with every field present in ``update`` applied.

    All present fields are validated before anything is applied, so on
    :class:`InvalidArgument` the caller's record is untouched and no
    partially merged copy exists. Fields absent from ``update`` keep their
    current value. ``level`` and ``until_next_level`` are recomputed
    whenever ``experience`` is present and are never taken from input.
    """

    changes: dict[str, Any] = {}
    for field, is_valid in _MERGE_FIELDS:
        if not update.is_set(field):
            continue
        value = getattr(update, field)
        if is_valid is not None and not is_valid(value):
            raise InvalidArgument(f"invalid {field}: {value!r}")
        changes[field] = value

    if "experience" in changes:
        level, until_next_level = derive_stats(changes["experience"])
        changes["level"] = level
        changes["until_next_level"] = until_next_level

    return dataclasses.replace(player, **changes)
