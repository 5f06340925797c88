"""
Sign-Up Service — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures and capability stubs for the test suite.
How:   Stubs implement the real abstract interfaces and return canned values;
       tests swap behaviour per case with patch.object / AsyncMock.

Fixture Hierarchy (all function-scoped):
    ├── fake_account / fake_signup_body: canonical test data
    ├── email_validator_stub, add_account_stub, encrypter_stub,
    │   add_account_repository_stub, log_error_repository_stub
    └── test_client: HTTPX AsyncClient over an app with a stub controller
"""

import os
from typing import Optional

# Override settings for testing BEFORE any application imports
os.environ["MONGO_URL"] = "mongodb://localhost:27017/signup-service-test"
os.environ["MONGO_CONNECT_ATTEMPTS"] = "1"
os.environ["BCRYPT_SALT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from signup_service.data.protocols import (
    AddAccountRepository,
    Encrypter,
    LogErrorRepository,
)
from signup_service.domain.models import AccountModel, AddAccountModel
from signup_service.domain.usecases import AddAccount
from signup_service.presentation.http import HttpRequest
from signup_service.presentation.protocols import EmailValidator


# ══════════════════════════════════════════════════════════════════════════
# Capability Stubs
# ══════════════════════════════════════════════════════════════════════════

def make_fake_account() -> AccountModel:
    return AccountModel(
        id="valid_id",
        name="valid_name",
        email="valid_email@mail.com",
        password="hashed_password",
    )


class EmailValidatorStub(EmailValidator):
    def is_valid(self, email: str) -> bool:
        return True


class AddAccountStub(AddAccount):
    async def add(self, account: AddAccountModel) -> AccountModel:
        return make_fake_account()


class EncrypterStub(Encrypter):
    async def encrypt(self, value: str) -> str:
        return "hashed_password"


class AddAccountRepositoryStub(AddAccountRepository):
    async def add(self, account_data: AddAccountModel) -> AccountModel:
        return make_fake_account()


class LogErrorRepositoryStub(LogErrorRepository):
    def __init__(self):
        self.stacks = []
        self.request_ids = []

    async def log_error(self, stack: str, request_id: Optional[str] = None) -> None:
        self.stacks.append(stack)
        self.request_ids.append(request_id)


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_account() -> AccountModel:
    return make_fake_account()


@pytest.fixture
def fake_signup_body() -> dict:
    return {
        "name": "any_name",
        "email": "any_email@mail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }


@pytest.fixture
def fake_request(fake_signup_body) -> HttpRequest:
    return HttpRequest(body=fake_signup_body)


# ══════════════════════════════════════════════════════════════════════════
# Stub Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def email_validator_stub() -> EmailValidatorStub:
    return EmailValidatorStub()


@pytest.fixture
def add_account_stub() -> AddAccountStub:
    return AddAccountStub()


@pytest.fixture
def encrypter_stub() -> EncrypterStub:
    return EncrypterStub()


@pytest.fixture
def add_account_repository_stub() -> AddAccountRepositoryStub:
    return AddAccountRepositoryStub()


@pytest.fixture
def log_error_repository_stub() -> LogErrorRepositoryStub:
    return LogErrorRepositoryStub()


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def stub_app(email_validator_stub, add_account_stub):
    """
    Application wired with stub capabilities instead of bcrypt and MongoDB.

    The lifespan is not run by ASGITransport, so no MongoDB is contacted.
    """
    from signup_service.main import create_app
    from signup_service.presentation.controllers import SignUpController

    controller = SignUpController(email_validator_stub, add_account_stub)
    return create_app(signup_controller=controller)


@pytest_asyncio.fixture
async def test_client(stub_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_signup(test_client):
            response = await test_client.post("/api/signup", json={...})
            assert response.status_code == 200
    """
    transport = ASGITransport(app=stub_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
