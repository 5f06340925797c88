"""
Sign-Up Service — SignUp Controller
=====================================

What:  Validates a sign-up request and creates the account.
Who:   Called through LogControllerDecorator by POST /api/signup.

Validation order (first failure wins):
    1. name, email, password, passwordConfirmation present → MissingParamError
    2. each of them is a string                            → InvalidParamError
    3. password == passwordConfirmation                    → InvalidParamError
    4. password at most 72 bytes of UTF-8                  → InvalidParamError
    5. email syntax (EmailValidator)                       → InvalidParamError

Status mapping:
    200  AccountModel returned by AddAccount
    400  MissingParamError / InvalidParamError
    500  ServerError carrying the traceback of anything raised inside handle()
"""

import logging

from signup_service.domain.models import AddAccountModel
from signup_service.domain.usecases import AddAccount
from signup_service.exceptions import InvalidParamError, MissingParamError
from signup_service.presentation.http import (
    HttpRequest,
    HttpResponse,
    bad_request,
    ok,
    server_error,
)
from signup_service.presentation.protocols import Controller, EmailValidator

logger = logging.getLogger(__name__)


class SignUpController(Controller):

    REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")

    # bcrypt input limit
    MAX_PASSWORD_BYTES = 72

    def __init__(self, email_validator: EmailValidator, add_account: AddAccount):
        self.email_validator = email_validator
        self.add_account = add_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body

            for field in self.REQUIRED_FIELDS:
                if not body.get(field):
                    logger.info("Sign-up rejected: missing %s", field)
                    return bad_request(MissingParamError(field))

            for field in self.REQUIRED_FIELDS:
                if not isinstance(body[field], str):
                    logger.info("Sign-up rejected: %s is not a string", field)
                    return bad_request(InvalidParamError(field))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                logger.info("Sign-up rejected: password confirmation mismatch")
                return bad_request(InvalidParamError("passwordConfirmation"))

            if len(password.encode("utf-8")) > self.MAX_PASSWORD_BYTES:
                logger.info(
                    "Sign-up rejected: password longer than %d bytes", self.MAX_PASSWORD_BYTES
                )
                return bad_request(InvalidParamError("password"))

            if not self.email_validator.is_valid(email):
                logger.info("Sign-up rejected: invalid email")
                return bad_request(InvalidParamError("email"))

            account = await self.add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
            return ok(account)

        except Exception as e:
            logger.error("Sign-up failed: %s", str(e), exc_info=True)
            return server_error(e)
