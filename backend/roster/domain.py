"""Plain player record and the fixed enumerations it refers to."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Race(str, Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


@dataclass
class Player:
    """A single player's attribute set.

    ``level`` and ``until_next_level`` are derived from ``experience`` and
    are only ever written by the rule layer. ``id`` stays ``None`` until
    storage assigns one.
    """

    name: str
    title: str
    race: Race
    profession: Profession
    experience: int
    level: int
    until_next_level: int
    birthday: datetime
    banned: bool = False
    id: Optional[int] = None
