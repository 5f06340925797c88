"""
Sign-Up Service — Account Repository (MongoDB)
================================================

What:  Inserts new accounts into the `accounts` collection.
How:   One insert_one per call; the generated ObjectId is surfaced as `id`
       through MongoConnection.map_document.

Stored document: {_id, name, email, password}
"""

import logging

from signup_service.data.protocols import AddAccountRepository
from signup_service.domain.models import AccountModel, AddAccountModel
from signup_service.infra.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


class AccountMongoRepository(AddAccountRepository):

    COLLECTION = "accounts"

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def add(self, account_data: AddAccountModel) -> AccountModel:
        collection = await self.connection.get_collection(self.COLLECTION)

        document = account_data.model_dump()
        result = await collection.insert_one(document)
        logger.debug("Inserted account document %s", result.inserted_id)

        return AccountModel(
            **MongoConnection.map_document({**document, "_id": result.inserted_id})
        )
