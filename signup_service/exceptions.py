"""
Sign-Up Service — Custom Exception Hierarchy
==============================================

What:  Application-specific error types for the sign-up pipeline.
How:   Each error carries a message and an optional context dict. The
       validation and server errors are also used as response bodies by the
       controllers, so they compare equal by type, message and context.
Who:   Built by controllers and infra adapters; serialized by the route
       adapter and the global exception handlers in main.py.

Exception Hierarchy:
    SignUpServiceError (base)
    ├── ParamValidationError     → 400 Bad Request (caller can fix)
    │   ├── MissingParamError
    │   └── InvalidParamError
    ├── ServerError              → 500 Internal Server Error
    └── DatabaseError            → MongoDB unreachable after start-up retries
"""

from typing import Any, Dict, Optional


class SignUpServiceError(Exception):
    """
    Base exception for all sign-up service errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def name(self) -> str:
        """Error name exposed in the JSON error envelope."""
        return type(self).__name__

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.context == other.context

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class ParamValidationError(SignUpServiceError):
    """
    Raised or returned when client input fails validation.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MissingParamError(ParamValidationError):
    """A required body field is absent or empty."""

    def __init__(self, param_name: str):
        super().__init__(message=f"Missing param: {param_name}", field=param_name)


class InvalidParamError(ParamValidationError):
    """A body field is present but its value is not acceptable."""

    def __init__(self, param_name: str):
        super().__init__(message=f"Invalid param: {param_name}", field=param_name)


class ServerError(SignUpServiceError):
    """
    Unexpected failure somewhere below a controller.

    What:    Wraps the formatted traceback of the original exception.
    HTTP:    500 Internal Server Error

    The stack is kept on the instance (and forwarded to the error log by
    LogControllerDecorator) but the JSON envelope only carries the generic
    message.
    """

    def __init__(self, stack: Optional[str] = None):
        super().__init__(
            message="Internal server error",
            context={"stack": stack} if stack is not None else None,
        )
        self.stack = stack


class DatabaseError(SignUpServiceError):
    """
    Raised when MongoDB cannot be reached.

    When:    The start-up readiness check exhausted its retries.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
