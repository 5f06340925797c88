"""
Sign-Up Service — Use-Case Contracts
======================================

What:  Abstract interfaces for application-level operations.
Who:   Controllers depend on these; data/usecases provides implementations.
"""

from abc import ABC, abstractmethod

from signup_service.domain.models import AccountModel, AddAccountModel


class AddAccount(ABC):
    """Creates an account from sign-up input."""

    @abstractmethod
    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Create and persist a new account.

        Returns:
            The stored account, including its generated id.

        Raises:
            Whatever the underlying capabilities raise; implementations do not
            recover locally.
        """
        ...
