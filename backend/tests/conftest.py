import os
import sys
import asyncio
from datetime import datetime, timezone

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Ensure the ORM models are registered with the declarative Base so
# metadata.create_all creates the player table.
from roster import db, models  # noqa: F401
from roster.domain import Player, Profession, Race
from roster.services.stats import derive_stats

# Honour an externally provided DATABASE_URL but fall back to an in-memory
# SQLite database so local runs remain isolated.
DEFAULT_DB_URL = os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture(scope="session")
def session_loop():
    """Single event loop for all sync tests that need to run async code."""

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture(autouse=True, scope="session")
def ensure_database(session_loop):
    """Ensure the test database starts clean and honours DATABASE_URL."""

    mp = pytest.MonkeyPatch()
    desired_url = os.getenv("DATABASE_URL") or DEFAULT_DB_URL
    mp.setenv("DATABASE_URL", desired_url)

    if desired_url.startswith("sqlite") and ":memory:" not in desired_url:
        path = desired_url.split("///")[-1]
        if os.path.exists(path):
            os.remove(path)

    session_loop.run_until_complete(db.dispose_engine())
    yield
    session_loop.run_until_complete(db.dispose_engine())
    mp.undo()


@pytest.fixture
def reset_schema(session_loop):
    """Give the test an empty player table."""

    session_loop.run_until_complete(db.create_schema(drop_existing=True))
    yield


@pytest.fixture
def session(reset_schema, session_loop):
    scope = db.session_scope()
    s = session_loop.run_until_complete(scope.__aenter__())
    try:
        yield s
    finally:
        session_loop.run_until_complete(scope.__aexit__(None, None, None))


def make_player(
    name: str = "Hero",
    *,
    experience: int = 100,
    title: str = "Wanderer",
    race: Race = Race.HUMAN,
    profession: Profession = Profession.WARRIOR,
    birthday: datetime | None = None,
    banned: bool = False,
    id: int | None = None,
) -> Player:
    level, until_next_level = derive_stats(experience)
    return Player(
        id=id,
        name=name,
        title=title,
        race=race,
        profession=profession,
        experience=experience,
        level=level,
        until_next_level=until_next_level,
        birthday=birthday or datetime(2010, 6, 15, tzinfo=timezone.utc),
        banned=banned,
    )
