"""
Sign-Up Service — HTTP Value Objects & Response Helpers
=========================================================

What:  Framework-agnostic request/response values used by controllers.
How:   Frozen dataclasses plus helpers mapping outcomes to status codes.
       routes/adapter.py converts them to and from FastAPI objects.
"""

import traceback
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from signup_service.exceptions import ParamValidationError, ServerError


@dataclass(frozen=True)
class HttpRequest:
    body: Dict[str, Any] = field(default_factory=dict)
    request_id: Optional[str] = None


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def bad_request(error: ParamValidationError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error(error: BaseException) -> HttpResponse:
    """Wrap an unexpected exception in a 500 response carrying its traceback."""
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return HttpResponse(status_code=500, body=ServerError(stack))
