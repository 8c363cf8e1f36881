"""Logging shared by the CRUD API and the keyword proxy.

Each process logs through one loguru sink tagged with its service name, so
the two services can share a log stream.  Records bound with ``error_id``
(see ``crud_api.errors``) carry it on the line, matching the id returned to
the client in a 500 response.  Stdlib records (uvicorn, httpx, sqlalchemy)
are forwarded into the same sink.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

# Third-party loggers that are chatty at INFO.
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "aiomysql")


def format_record(record: dict) -> str:
    """Build the loguru format for *record*, adding ``error_id`` when bound."""
    fmt = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    if "service" in record["extra"]:
        fmt += "<magenta>{extra[service]}</magenta> | "
    fmt += "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    if "error_id" in record["extra"]:
        fmt += " <yellow>[error_id={extra[error_id]}]</yellow>"
    return fmt + "\n{exception}"


class StdlibBridge(logging.Handler):
    """Re-emit stdlib records through loguru at the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(service: str, level: str = "INFO") -> None:
    """Route all logging of *service* to stderr.  Safe to call more than once."""
    level = level.upper()

    logger.remove()
    logger.configure(extra={"service": service})
    logger.add(sys.stderr, level=level, format=format_record)

    logging.basicConfig(handlers=[StdlibBridge()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info("Logging initialised for {} (level={})", service, level)
