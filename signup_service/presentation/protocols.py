"""
Sign-Up Service — Presentation Contracts
==========================================

What:  Interfaces controllers implement and consume.
How:   Abstract base classes, same as the data-layer capabilities.
"""

from abc import ABC, abstractmethod

from signup_service.presentation.http import HttpRequest, HttpResponse


class Controller(ABC):
    """
    Handles one framework-agnostic HTTP request.

    Contract:
        - handle() never raises; every failure becomes an HttpResponse.
        - Decorators implement this same interface so they can wrap any
          controller transparently.
    """

    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        ...


class EmailValidator(ABC):
    """Syntactic email check. No network or disk I/O."""

    @abstractmethod
    def is_valid(self, email: str) -> bool:
        ...
