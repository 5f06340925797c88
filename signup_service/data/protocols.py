"""
Sign-Up Service — Data-Layer Capabilities
===========================================

What:  Single-method abstract interfaces for the external concerns the use
       cases need (hashing, persistence, error logging).
How:   Concrete implementations live in signup_service.infra; tests provide
       stubs implementing the same interface.

Implementations:
    - Encrypter:             infra.cryptography.BcryptAdapter
    - AddAccountRepository:  infra.db.AccountMongoRepository
    - LogErrorRepository:    infra.db.LogMongoRepository
"""

from abc import ABC, abstractmethod
from typing import Optional

from signup_service.domain.models import AccountModel, AddAccountModel


class Encrypter(ABC):
    """One-way hashing of a plaintext secret."""

    @abstractmethod
    async def encrypt(self, value: str) -> str:
        """
        Hash `value`.

        Raises:
            Any error from the underlying primitive, unchanged.
        """
        ...


class AddAccountRepository(ABC):
    """Persistence of new accounts."""

    @abstractmethod
    async def add(self, account_data: AddAccountModel) -> AccountModel:
        """
        Insert one account.

        Args:
            account_data: Account values with the password already hashed.

        Returns:
            The stored account with its generated id.
        """
        ...


class LogErrorRepository(ABC):
    """Persistent error log."""

    @abstractmethod
    async def log_error(self, stack: str, request_id: Optional[str] = None) -> None:
        """Append one error record holding `stack` and, if known, the request id."""
        ...
