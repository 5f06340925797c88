"""
Sign-Up Service — Request Correlation
=======================================

What:  Gives every request a correlation id that follows it into the
       application log and into the `errors` collection.
How:   RequestIDMiddleware accepts a well-formed client X-Request-ID or
       generates one, publishes it on request.state and in a ContextVar, and
       echoes it in the response header. RequestIDLogFilter stamps the current
       id on every log record so the log format can print it.

Flow of the id:
    X-Request-ID header → request.state.request_id → HttpRequest.request_id
    → LogControllerDecorator → LogErrorRepository.log_error(request_id=...)
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client ids are written to log lines and error documents
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: Optional[str]) -> str:
    """Keep a client-supplied id when it is a short token, otherwise mint one."""
    if header_value and _VALID_REQUEST_ID.match(header_value):
        return header_value
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to each record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or "-"
        return True
