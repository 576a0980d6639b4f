"""Logging setup shared by the Python services."""

from __future__ import annotations

import contextvars
import logging
import sys

LOG_FORMAT = "%(asctime)s : %(levelname)-5s : %(name)s%(request_id)s : %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_cv: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamps each record with the current request id (first 8 chars), or nothing."""

    def filter(self, record: logging.LogRecord) -> bool:
        rid = request_id_cv.get()
        record.request_id = f" [{rid[:8]}]" if rid != "-" else ""
        return True


def configure_logging(level: str = "INFO") -> None:
    """Replace the root handlers with a single stdout handler."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)
    root.addHandler(handler)

    # access lines duplicate our own request logging
    logging.getLogger("uvicorn.access").setLevel(max(numeric_level, logging.WARNING))


def set_request_id(value: str) -> None:
    request_id_cv.set(value)
