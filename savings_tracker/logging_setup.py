"""Log lines tagged with the HTTP request they belong to."""

from __future__ import annotations

import logging
import sys
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s %(method)s %(path)s] %(message)s"

logger = logging.getLogger(__name__)


class RequestContextFilter(logging.Filter):
    """Stamp records with the active request's id, method and path ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, "request_id", "-")
            record.method = request.method
            record.path = request.path
        else:
            record.request_id = record.method = record.path = "-"
        return True


HANDLER_NAME = "savings_tracker"


def setup_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(RequestContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # repeated app factories replace our handler instead of stacking copies
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)


def init_request_logging(app: Flask) -> None:
    """Give every request an id (client supplied or generated) and log its outcome."""

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex[:12]

    @app.after_request
    def _log_response(response: Response) -> Response:
        response.headers[REQUEST_ID_HEADER] = getattr(g, "request_id", "-")
        logger.info("status=%s", response.status_code)
        return response
