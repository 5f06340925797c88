"""
Sign-Up Service — Default Content-Type Middleware
===================================================

What:  Responses default to `application/json`.
How:   Only fills the header when the route did not set one, so a route that
       answers with e.g. XML keeps its own content type.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

DEFAULT_CONTENT_TYPE = "application/json"


class ContentTypeMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if "content-type" not in response.headers:
            response.headers["content-type"] = DEFAULT_CONTENT_TYPE
        return response
