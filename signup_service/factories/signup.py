"""
Sign-Up Service — Sign-Up Controller Factory
==============================================

Object graph:

    LogControllerDecorator
    ├── SignUpController
    │   ├── EmailValidatorAdapter
    │   └── DbAddAccount
    │       ├── BcryptAdapter(salt_rounds, timeout)
    │       └── AccountMongoRepository(connection)
    └── LogMongoRepository(connection)
"""

from signup_service.config import Settings, settings as default_settings
from signup_service.data.usecases import DbAddAccount
from signup_service.decorators import LogControllerDecorator
from signup_service.infra.cryptography import BcryptAdapter
from signup_service.infra.db import (
    AccountMongoRepository,
    LogMongoRepository,
    MongoConnection,
)
from signup_service.presentation.controllers import SignUpController
from signup_service.presentation.protocols import Controller
from signup_service.utils import EmailValidatorAdapter


def make_signup_controller(
    connection: MongoConnection,
    settings: Settings = default_settings,
) -> Controller:
    bcrypt_adapter = BcryptAdapter(
        salt_rounds=settings.bcrypt_salt_rounds,
        timeout=settings.hash_timeout_seconds,
    )
    account_repository = AccountMongoRepository(connection)
    db_add_account = DbAddAccount(bcrypt_adapter, account_repository)

    signup_controller = SignUpController(EmailValidatorAdapter(), db_add_account)
    return LogControllerDecorator(signup_controller, LogMongoRepository(connection))
