"""
Sign-Up Service — Error-Logging Controller Decorator
======================================================

What:  Wraps any Controller and records server errors in the error log.
How:   Delegates to the wrapped controller, then inspects the response: on a
       500, body.stack is handed to LogErrorRepository.log_error together with
       the request's correlation id. The response object itself is returned
       untouched.

Failure semantics:
    A failing log repository must not turn a response into a different one,
    so its exceptions are written to the application log and dropped.
    Without a log repository the decorator is a pass-through.
"""

import logging
from typing import Generic, Optional, TypeVar

from signup_service.data.protocols import LogErrorRepository
from signup_service.presentation.http import HttpRequest, HttpResponse
from signup_service.presentation.protocols import Controller

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Controller)


class LogControllerDecorator(Controller, Generic[C]):

    def __init__(
        self,
        controller: C,
        log_error_repository: Optional[LogErrorRepository] = None,
    ):
        self.controller = controller
        self.log_error_repository = log_error_repository

    async def handle(self, request: HttpRequest) -> HttpResponse:
        response = await self.controller.handle(request)

        if response.status_code == 500 and self.log_error_repository is not None:
            stack = getattr(response.body, "stack", None)
            if stack is None:
                stack = repr(response.body)
            try:
                await self.log_error_repository.log_error(stack, request_id=request.request_id)
            except Exception:
                logger.exception("Failed to write error log entry")

        return response
