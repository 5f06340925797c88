"""
Sign-Up Service — DbAddAccount Use Case
=========================================

What:  Creates an account: hash the password, then persist.
How:   Composes an Encrypter and an AddAccountRepository.
Who:   Called by SignUpController.

Flow:
    AddAccountModel(plaintext) ──▶ Encrypter.encrypt ──▶ AddAccountModel(hash)
        ──▶ AddAccountRepository.add ──▶ AccountModel

Errors from either step propagate unchanged; SignUpController is the single
place where they become HTTP 500 responses.
"""

import logging

from signup_service.data.protocols import AddAccountRepository, Encrypter
from signup_service.domain.models import AccountModel, AddAccountModel
from signup_service.domain.usecases import AddAccount

logger = logging.getLogger(__name__)


class DbAddAccount(AddAccount):
    """AddAccount backed by a hashing capability and an account repository."""

    def __init__(self, encrypter: Encrypter, add_account_repository: AddAccountRepository):
        self.encrypter = encrypter
        self.add_account_repository = add_account_repository

    async def add(self, account: AddAccountModel) -> AccountModel:
        hashed_password = await self.encrypter.encrypt(account.password)

        # The repository only ever sees the hashed copy
        account_data = account.model_copy(update={"password": hashed_password})
        created = await self.add_account_repository.add(account_data)

        logger.info("Account created: %s", created.id)
        return created
