"""FastAPI dependency injection for DB sessions.

Usage in route handlers::

    @router.get("/things")
    async def list_things(db: DbSession) -> list[ThingResponse]:
        ...

The session factory is built once in the app lifespan and stored on
``app.state``.  ``get_db`` raises HTTP 503 if no database was configured.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an async SQLAlchemy session, closing it after the request.

    The session holds one pooled connection.  It is closed on every exit
    path, which returns the connection to the pool and rolls back anything
    the handler did not commit.
    """
    session_factory = request.app.state.db_session_factory
    if session_factory is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not configured (AGENTBOOK_DATABASE_URL is unset).",
        )
    session: AsyncSession = session_factory()
    try:
        yield session
    finally:
        await session.close()


DbSession = Annotated[AsyncSession, Depends(get_db)]
"""Annotated dependency: async SQLAlchemy session (auto-closed after request)."""
