from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.responses import PlainTextResponse, Response
from loguru import logger

from agentbook.keyword_proxy.forwarder import KeywordForwarder
from agentbook.keyword_proxy.settings import get_settings
from agentbook.log import setup_logging

KEYWORD_ERROR = "Error: Keyword not found"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging("keyword-proxy", settings.log_level)

    _app.state.forwarder = KeywordForwarder(
        httpx.AsyncClient(timeout=settings.upstream_timeout),
        settings.upstream_url,
    )
    logger.info(
        "Keyword proxy starting (host={}, port={}, upstream={})",
        settings.host,
        settings.port,
        settings.upstream_url,
    )

    yield

    await _app.state.forwarder.aclose()
    logger.info("Keyword proxy shut down")


def get_forwarder(request: Request) -> KeywordForwarder:
    return request.app.state.forwarder


Forwarder = Annotated[KeywordForwarder, Depends(get_forwarder)]

app = FastAPI(title="Agentbook Keyword Proxy", lifespan=lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/say", response_class=Response, responses={500: {"description": KEYWORD_ERROR}})
async def say(forwarder: Forwarder, keyword: str | None = Query(None)) -> Response:
    """Relay the upstream body for *keyword*, or a fixed 500 on any failure."""
    try:
        reply = await forwarder.forward(keyword)
    except httpx.HTTPError as exc:
        logger.opt(exception=exc).error("Upstream call failed for keyword={!r}", keyword)
        return PlainTextResponse(KEYWORD_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(content=reply.content, media_type=reply.media_type)
