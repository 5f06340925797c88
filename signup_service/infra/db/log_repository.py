"""
Sign-Up Service — Error Log Repository (MongoDB)
==================================================

What:  Appends server-error stacks to the `errors` collection.
Who:   LogControllerDecorator, whenever a wrapped controller answers 500.

Stored document: {_id, errorMessage, createdAt (UTC)[, requestId]}
"""

from datetime import datetime, timezone
from typing import Optional

from signup_service.data.protocols import LogErrorRepository
from signup_service.infra.db.mongo_connection import MongoConnection


class LogMongoRepository(LogErrorRepository):

    COLLECTION = "errors"

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def log_error(self, stack: str, request_id: Optional[str] = None) -> None:
        document = {
            "errorMessage": stack,
            "createdAt": datetime.now(timezone.utc),
        }
        if request_id:
            document["requestId"] = request_id

        collection = await self.connection.get_collection(self.COLLECTION)
        await collection.insert_one(document)
