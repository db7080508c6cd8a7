from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String

from .db import Base
from .domain import Profession, Race


class PlayerRow(Base):
    __tablename__ = "player"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(12), nullable=False)
    title = Column(String(30), nullable=False)
    race = Column(Enum(Race, native_enum=False, length=16), nullable=False)
    profession = Column(
        Enum(Profession, native_enum=False, length=16), nullable=False
    )
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column(Integer, nullable=False)
    birthday = Column(DateTime(timezone=True), nullable=False)
    banned = Column(Boolean, nullable=False, default=False)
