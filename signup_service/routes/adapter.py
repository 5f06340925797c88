"""
Sign-Up Service — Controller Route Adapter
============================================

What:  Turns a Controller into a FastAPI endpoint.
How:   Request JSON → HttpRequest → controller.handle → HttpResponse → JSONResponse.
       The correlation id set by RequestIDMiddleware rides along on HttpRequest.

Body handling:
    An empty, unparsable or non-object JSON body becomes {}; the controller
    then reports the first missing field.

Response body handling:
    - SignUpServiceError → {"name": ..., "message": ...}
    - Pydantic model     → model_dump(mode="json")
    - anything else      → jsonable_encoder
"""

from typing import Any, Awaitable, Callable, Dict

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.requests import Request

from signup_service.exceptions import SignUpServiceError
from signup_service.presentation.http import HttpRequest, HttpResponse
from signup_service.presentation.protocols import Controller


async def read_json_body(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def to_json_response(response: HttpResponse) -> JSONResponse:
    body = response.body
    if isinstance(body, SignUpServiceError):
        content = body.to_dict()
    elif isinstance(body, BaseModel):
        content = body.model_dump(mode="json")
    else:
        content = jsonable_encoder(body)
    return JSONResponse(status_code=response.status_code, content=content)


def adapt_route(controller: Controller) -> Callable[[Request], Awaitable[JSONResponse]]:
    async def endpoint(request: Request) -> JSONResponse:
        http_request = HttpRequest(
            body=await read_json_body(request),
            request_id=getattr(request.state, "request_id", None),
        )
        http_response = await controller.handle(http_request)
        return to_json_response(http_response)

    return endpoint
