"""
Sign-Up Service — MongoDB Layer Unit Tests (Mocked)
=====================================================

What:  MongoConnection lifecycle, _id mapping, and both repositories.
How:   AsyncMongoClient is patched; collections are AsyncMock objects, so no
       MongoDB server is needed.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from signup_service.domain.models import AccountModel, AddAccountModel
from signup_service.exceptions import DatabaseError
from signup_service.infra.db import (
    AccountMongoRepository,
    LogMongoRepository,
    MongoConnection,
)

CLIENT_PATH = "signup_service.infra.db.mongo_connection.AsyncMongoClient"


def make_mock_client() -> MagicMock:
    client = MagicMock()
    client.close = AsyncMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client


def make_connection_with_collection(collection) -> MongoConnection:
    connection = MongoConnection("mongodb://localhost:27017/test")
    connection.get_collection = AsyncMock(return_value=collection)
    return connection


class TestMongoConnection:

    def setup_method(self):
        self.connection = MongoConnection(
            "mongodb://localhost:27017/test",
            timeout_ms=1234,
            connect_attempts=2,
            retry_min_wait=0,
            retry_max_wait=0,
        )

    @pytest.mark.asyncio
    async def test_connect_creates_client_with_timeout(self):
        with patch(CLIENT_PATH) as client_cls:
            await self.connection.connect()

        client_cls.assert_called_once_with("mongodb://localhost:27017/test", timeoutMS=1234)
        assert self.connection.is_connected

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self):
        with patch(CLIENT_PATH) as client_cls:
            await self.connection.connect()
            await self.connection.connect()
        client_cls.assert_called_once()

    @pytest.mark.asyncio
    async def test_disconnect_closes_client(self):
        client = make_mock_client()
        with patch(CLIENT_PATH, return_value=client):
            await self.connection.connect()
            await self.connection.disconnect()

        client.close.assert_awaited_once()
        assert not self.connection.is_connected

    @pytest.mark.asyncio
    async def test_disconnect_without_client_is_noop(self):
        await self.connection.disconnect()
        assert not self.connection.is_connected

    @pytest.mark.asyncio
    async def test_get_collection_reconnects_lazily(self):
        client = make_mock_client()
        with patch(CLIENT_PATH, return_value=client) as client_cls:
            await self.connection.connect()
            await self.connection.disconnect()

            await self.connection.get_collection("accounts")

        assert client_cls.call_count == 2
        assert self.connection.is_connected
        client.get_database.assert_called_with(None)
        client.get_database.return_value.__getitem__.assert_called_with("accounts")

    @pytest.mark.asyncio
    async def test_get_collection_uses_configured_database(self):
        connection = MongoConnection("mongodb://localhost:27017", database_name="custom")
        client = make_mock_client()
        with patch(CLIENT_PATH, return_value=client):
            await connection.get_collection("errors")
        client.get_database.assert_called_once_with("custom")

    @pytest.mark.asyncio
    async def test_ping_true_when_server_answers(self):
        client = make_mock_client()
        with patch(CLIENT_PATH, return_value=client):
            assert await self.connection.ping() is True
        client.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_ping_false_when_server_unreachable(self):
        client = make_mock_client()
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
        with patch(CLIENT_PATH, return_value=client):
            assert await self.connection.ping() is False

    @pytest.mark.asyncio
    async def test_wait_until_ready_retries_then_succeeds(self):
        client = make_mock_client()
        client.admin.command.side_effect = [
            ServerSelectionTimeoutError("no servers"),
            {"ok": 1},
        ]
        with patch(CLIENT_PATH, return_value=client):
            await self.connection.wait_until_ready()

        assert client.admin.command.await_count == 2

    @pytest.mark.asyncio
    async def test_wait_until_ready_raises_database_error_when_exhausted(self):
        client = make_mock_client()
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(DatabaseError) as exc_info:
                await self.connection.wait_until_ready()

        assert client.admin.command.await_count == 2
        assert exc_info.value.context["attempts"] == 2

    def test_map_document_renames_id(self):
        object_id = ObjectId()
        mapped = MongoConnection.map_document(
            {"_id": object_id, "name": "any_name", "email": "any_email@mail.com"}
        )
        assert mapped == {"id": str(object_id), "name": "any_name", "email": "any_email@mail.com"}

    def test_map_document_does_not_mutate_input(self):
        document = {"_id": "abc", "name": "any_name"}
        MongoConnection.map_document(document)
        assert document == {"_id": "abc", "name": "any_name"}


class TestAccountMongoRepository:

    @pytest.mark.asyncio
    async def test_add_inserts_and_returns_account(self):
        object_id = ObjectId()
        collection = MagicMock()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=object_id))
        sut = AccountMongoRepository(make_connection_with_collection(collection))

        account = await sut.add(
            AddAccountModel(name="any_name", email="any_email@mail.com", password="hashed_password")
        )

        collection.insert_one.assert_awaited_once_with(
            {"name": "any_name", "email": "any_email@mail.com", "password": "hashed_password"}
        )
        assert account == AccountModel(
            id=str(object_id),
            name="any_name",
            email="any_email@mail.com",
            password="hashed_password",
        )

    @pytest.mark.asyncio
    async def test_add_uses_accounts_collection(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
        connection = make_connection_with_collection(collection)

        await AccountMongoRepository(connection).add(
            AddAccountModel(name="n", email="e@mail.com", password="p")
        )

        connection.get_collection.assert_awaited_once_with("accounts")

    @pytest.mark.asyncio
    async def test_add_propagates_driver_error(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))
        sut = AccountMongoRepository(make_connection_with_collection(collection))

        with pytest.raises(ServerSelectionTimeoutError):
            await sut.add(AddAccountModel(name="n", email="e@mail.com", password="p"))


class TestLogMongoRepository:

    @pytest.mark.asyncio
    async def test_log_error_inserts_one_record(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        connection = make_connection_with_collection(collection)
        sut = LogMongoRepository(connection)

        before = datetime.now(timezone.utc)
        await sut.log_error("any_error")

        connection.get_collection.assert_awaited_once_with("errors")
        collection.insert_one.assert_awaited_once()
        document = collection.insert_one.await_args.args[0]
        assert document["errorMessage"] == "any_error"
        assert before <= document["createdAt"] <= datetime.now(timezone.utc)

    @pytest.mark.asyncio
    async def test_log_error_stores_request_id(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        sut = LogMongoRepository(make_connection_with_collection(collection))

        await sut.log_error("any_error", request_id="abc123")

        document = collection.insert_one.await_args.args[0]
        assert document["errorMessage"] == "any_error"
        assert document["requestId"] == "abc123"

    @pytest.mark.asyncio
    async def test_log_error_without_request_id_omits_field(self):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        sut = LogMongoRepository(make_connection_with_collection(collection))

        await sut.log_error("any_error")

        assert "requestId" not in collection.insert_one.await_args.args[0]
