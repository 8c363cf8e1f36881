"""Application-wide error mapping.

- Request validation errors become 400 instead of FastAPI's default 422.
- Store failures (any ``SQLAlchemyError``) become 500.  The client gets a
  generic message and an ``error_id``; the exception and the same id go to
  the server log.  Store error text and SQL never reach the response.
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from agentbook.crud_api.models.api import ErrorResponse, ServerErrorResponse, ValidationErrorResponse

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Resource not found"}}
BAD_REQUEST_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Invalid or missing fields"}
}
SERVER_ERROR_RESPONSE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ServerErrorResponse, "description": "Internal Server Error"}
}


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # "input" may be raw, undecodable request bytes; "ctx" may hold exception objects.
    errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    logger.debug("{} {} rejected: {}", request.method, request.url.path, errors)
    body = ValidationErrorResponse(errors=jsonable_encoder(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    error_id = uuid.uuid4().hex
    logger.bind(error_id=error_id).opt(exception=exc).error(
        "Store failure on {} {}", request.method, request.url.path
    )
    body = ServerErrorResponse(error_id=error_id)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, handle_store_error)  # type: ignore[arg-type]
