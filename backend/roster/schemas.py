from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .domain import Profession, Race


class PlayerOrder(str, Enum):
    """Sort keys; each value is the ``Player`` attribute it orders by."""

    ID = "id"
    NAME = "name"
    EXPERIENCE = "experience"
    BIRTHDAY = "birthday"
    LEVEL = "level"


class PlayerCreate(BaseModel):
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: datetime
    experience: int
    banned: bool = False

    model_config = ConfigDict(extra="forbid")


class PlayerUpdate(BaseModel):
    """Partial update; a field is applied only if it was explicitly provided.

    Presence is read from ``model_fields_set``, so leaving a field out and
    sending it are distinguishable. Derived stats and ``id`` are not
    accepted here.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    experience: Optional[int] = None
    birthday: Optional[datetime] = None
    banned: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _reject_unassignable_nulls(self) -> "PlayerUpdate":
        for field in ("race", "profession", "banned"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} must not be null")
        return self

    def is_set(self, field: str) -> bool:
        return field in self.model_fields_set


class PlayerQuery(BaseModel):
    """Optional filters; an unset filter always passes.

    ``after`` and ``before`` are epoch milliseconds.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None
