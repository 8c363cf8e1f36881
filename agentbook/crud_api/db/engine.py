"""Engine and session factory for the external sample database.

The pool is the only resource the CRUD API shares between requests, so its
bounds all come from ``ApiSettings``: ``db_pool_size`` connections, at most
``db_max_overflow`` extra, and ``db_pool_timeout`` seconds of waiting before
checkout fails with ``sqlalchemy.exc.TimeoutError`` (mapped to 500).
"""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from agentbook.crud_api.settings import ApiSettings


def create_engine(settings: ApiSettings) -> AsyncEngine:
    """Build the bounded-pool engine described by *settings*.

    Raises ``ValueError`` if no database URL is configured.
    """
    if not settings.database_url:
        msg = "database_url is not configured"
        raise ValueError(msg)
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        # MariaDB drops idle connections after wait_timeout
        pool_pre_ping=True,
    )


def describe_database(settings: ApiSettings) -> str:
    """Connection URL with the password masked, for log lines."""
    if not settings.database_url:
        return "<unset>"
    return make_url(settings.database_url).render_as_string(hide_password=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """One session per request; rows stay readable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False)
