"""Player rule layer (pure helpers, no I/O) and the service that drives it."""

from .validation import (
    is_birthday_valid,
    is_experience_valid,
    is_name_valid,
    is_player_valid,
    is_title_valid,
)
from .stats import compute_experience_next_level, compute_level
from .merge import merge_player_update
from .query import filter_players, sort_players
from .pagination import paginate
from .players import PlayerService, player_service_scope

__all__ = [
    "is_name_valid",
    "is_title_valid",
    "is_experience_valid",
    "is_birthday_valid",
    "is_player_valid",
    "compute_level",
    "compute_experience_next_level",
    "merge_player_update",
    "filter_players",
    "sort_players",
    "paginate",
    "PlayerService",
    "player_service_scope",
]
