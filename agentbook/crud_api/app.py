from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from agentbook.crud_api.db.engine import create_engine, create_session_factory, describe_database
from agentbook.crud_api.errors import install_error_handlers
from agentbook.crud_api.routers.agents import router as agents_router
from agentbook.crud_api.routers.companies import router as companies_router
from agentbook.crud_api.settings import get_settings
from agentbook.log import setup_logging


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # -- Startup ---------------------------------------------------------------
    settings = get_settings()
    setup_logging("crud-api", settings.log_level)

    logger.info("CRUD API starting (host={}, port={})", settings.host, settings.port)

    _app.state.db_engine = None
    _app.state.db_session_factory = None

    # -- Database --------------------------------------------------------------
    if settings.database_url:
        engine = create_engine(settings)
        _app.state.db_engine = engine
        _app.state.db_session_factory = create_session_factory(engine)
        logger.info(
            "Database: {} (pool_size={}, max_overflow={})",
            describe_database(settings),
            settings.db_pool_size,
            settings.db_max_overflow,
        )
    else:
        logger.warning("AGENTBOOK_DATABASE_URL not set -- data routes will answer 503")

    yield

    # -- Shutdown --------------------------------------------------------------
    logger.info("CRUD API shutting down")

    # Closes all pooled connections.
    if _app.state.db_engine is not None:
        await _app.state.db_engine.dispose()
        logger.info("Database: disposed")


app = FastAPI(
    title="Agentbook CRUD API",
    description="REST access to the agents and company tables of the sample database.",
    lifespan=lifespan,
)
install_error_handlers(app)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(agents_router)
app.include_router(companies_router)
