"""
Sign-Up Service — Sign-Up Route
=================================

What:  POST /api/signup.
How:   The router is built per application around an already wired
       controller (see factories.make_signup_controller).

Request Flow:
    1. Client sends JSON {name, email, password, passwordConfirmation}
    2. adapt_route converts it into an HttpRequest
    3. LogControllerDecorator → SignUpController → DbAddAccount
    4. 200 account | 400 validation error | 500 server error
"""

from fastapi import APIRouter

from signup_service.presentation.protocols import Controller
from signup_service.routes.adapter import adapt_route
from signup_service.schemas.account import AccountResponse, ErrorResponse, SignUpRequest


def build_router(signup_controller: Controller) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["Sign-Up"])

    router.add_api_route(
        "/signup",
        adapt_route(signup_controller),
        methods=["POST"],
        responses={
            200: {"description": "Account created", "model": AccountResponse},
            400: {"description": "Missing or invalid parameter", "model": ErrorResponse},
            500: {"description": "Unexpected server error", "model": ErrorResponse},
        },
        summary="Create an account",
        description=(
            "Registers a new account. The password is stored as a bcrypt hash; "
            "the stored account is returned."
        ),
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {
                    "application/json": {"schema": SignUpRequest.model_json_schema()}
                },
            }
        },
    )

    return router
