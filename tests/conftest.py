"""Shared test fixtures.

Most tests run against a throwaway SQLite file (``sqlite+aiosqlite``)
provisioned from the ORM metadata -- no Docker needed.  Tests marked
``integration`` use a real MariaDB started by testcontainers and only run
when ``AGENTBOOK_RUN_INTEGRATION=1``.
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agentbook.crud_api.db.engine import create_engine, create_session_factory
from agentbook.crud_api.db.tables import Base
from agentbook.crud_api.settings import ApiSettings


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.environ.get("AGENTBOOK_RUN_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set AGENTBOOK_RUN_INTEGRATION=1 to run integration tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


# ---------------------------------------------------------------------------
# SQLite: one database file per test
# ---------------------------------------------------------------------------


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'sample.db'}"


@pytest.fixture
def api_settings(sqlite_url: str) -> ApiSettings:
    return ApiSettings(_env_file=None, database_url=sqlite_url)


@pytest.fixture
async def async_engine(api_settings: ApiSettings) -> AsyncIterator[AsyncEngine]:
    """Engine with the ``agents`` and ``company`` tables created."""
    engine = create_engine(api_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(async_engine)


@pytest.fixture
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# MariaDB (integration only): container started once per test run
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def mariadb_url() -> Iterator[str]:
    """URL of a MariaDB 11 container, rewritten for the aiomysql driver."""
    from testcontainers.mysql import MySqlContainer

    with MySqlContainer(image="mariadb:11", username="test", password="test", dbname="sample") as db:
        url = make_url(db.get_connection_url()).set(drivername="mysql+aiomysql")
        yield url.render_as_string(hide_password=False)
