"""Per-field predicates for player attributes.

Each predicate returns ``True``/``False`` and never raises; ``None`` and
values of the wrong type are simply invalid.
"""

from datetime import datetime, timezone
from typing import Any

from ..domain import Player
from ..time_utils import assume_utc

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30
MAX_EXPERIENCE = 10_000_000

BIRTHDAY_AFTER = datetime(2000, 1, 1, tzinfo=timezone.utc)
BIRTHDAY_BEFORE = datetime(3000, 1, 1, tzinfo=timezone.utc)


def is_name_valid(name: Any) -> bool:
    return isinstance(name, str) and 0 < len(name) <= MAX_NAME_LENGTH


def is_title_valid(title: Any) -> bool:
    return isinstance(title, str) and len(title) <= MAX_TITLE_LENGTH


def is_experience_valid(experience: Any) -> bool:
    # bool is a subclass of int in Python
    if isinstance(experience, bool) or not isinstance(experience, int):
        return False
    return 0 < experience < MAX_EXPERIENCE


def is_birthday_valid(birthday: Any) -> bool:
    """Birthday must lie strictly between 2000-01-01 and 3000-01-01 (UTC).

    Naive datetimes are taken as UTC.
    """
    if not isinstance(birthday, datetime):
        return False
    # Aware datetimes compare across offsets without being converted.
    value = assume_utc(birthday)
    try:
        return value.timestamp() > 0 and BIRTHDAY_AFTER < value < BIRTHDAY_BEFORE
    except (OverflowError, ValueError):
        return False


def is_player_valid(player: Player | None) -> bool:
    """Check the validated fields of a whole record.

    Race, profession and the banned flag are not checked here.
    """
    return (
        player is not None
        and is_name_valid(player.name)
        and is_title_valid(player.title)
        and is_experience_valid(player.experience)
        and is_birthday_valid(player.birthday)
    )
