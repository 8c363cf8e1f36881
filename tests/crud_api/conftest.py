"""Shared fixtures for CRUD API tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agentbook.crud_api.app import app


@pytest.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    """Async HTTP client wired to the app with a test session factory.

    The app lifespan does NOT run under ``ASGITransport``, so the state
    fields it would set are pre-set here.  ``get_db`` itself is not
    overridden: every request opens and closes a real pooled session.
    """
    app.state.db_engine = None
    app.state.db_session_factory = session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.state.db_session_factory = None
