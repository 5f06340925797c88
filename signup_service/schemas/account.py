"""
Sign-Up Service — Request/Response Schemas
============================================

What:  Pydantic models describing the HTTP contract.
How:   Used for OpenAPI documentation only. The sign-up route does NOT let
       FastAPI validate the body against SignUpRequest: validation and its
       400 responses belong to SignUpController.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Body of POST /api/signup."""
    name: str = Field(description="Display name")
    email: str = Field(description="Email address (syntax-checked)")
    password: str = Field(description="Plaintext password")
    passwordConfirmation: str = Field(description="Must equal password")


class AccountResponse(BaseModel):
    """
    Returned by POST /api/signup with HTTP 200.

    `password` holds the bcrypt hash, never the plaintext.
    """
    id: str = Field(description="Generated account identifier")
    name: str
    email: str
    password: str = Field(description="bcrypt hash of the password")


class ErrorResponse(BaseModel):
    """
    Error envelope for 400 and 500 responses.

    Example:
        {"name": "MissingParamError", "message": "Missing param: email"}
    """
    name: str = Field(description="Error type: MissingParamError, InvalidParamError, ServerError")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
