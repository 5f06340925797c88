"""
Sign-Up Service — MongoDB Connection Management
=================================================

What:  Owns the pymongo AsyncMongoClient for one application instance.
How:   Constructed explicitly by create_app() and passed to the repositories.
       connect() builds the client (no network I/O; the driver connects on
       first use), disconnect() closes it, and get_collection() reconnects
       lazily when called while disconnected.
Who:   Repositories (per operation), the health route, and the lifespan
       handler in main.py (readiness check and shutdown).

Timeouts:
    Every driver operation is bounded by the client-side `timeoutMS` option,
    which also caps server selection when MongoDB is unreachable.

Readiness:
    wait_until_ready() pings with exponential backoff (tenacity). It is only
    called at start-up; request-path operations are never retried.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from signup_service.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Lifecycle wrapper around AsyncMongoClient.

    States:
        disconnected (client is None) ──connect()──▶ connected
        connected ──disconnect()──▶ disconnected
        disconnected ──get_collection()──▶ connected (lazy reconnect)
    """

    def __init__(
        self,
        url: str,
        database_name: Optional[str] = None,
        timeout_ms: int = 5000,
        connect_attempts: int = 3,
        retry_min_wait: int = 1,
        retry_max_wait: int = 10,
    ):
        self.url = url
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self.connect_attempts = connect_attempts
        self.retry_min_wait = retry_min_wait
        self.retry_max_wait = retry_max_wait
        self._client: Optional[AsyncMongoClient] = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        if self._client is not None:
            return
        self._client = AsyncMongoClient(self.url, timeoutMS=self.timeout_ms)
        logger.info("MongoDB client created (timeoutMS=%d)", self.timeout_ms)

    async def disconnect(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.close()
        logger.info("MongoDB client closed")

    async def get_collection(self, name: str) -> AsyncCollection:
        if self._client is None:
            logger.info("MongoDB client not connected; reconnecting for '%s'", name)
            await self.connect()
        # database_name=None selects the database named in the URL
        return self._client.get_database(self.database_name)[name]

    async def ping(self) -> bool:
        """Health probe. Returns False instead of raising."""
        try:
            await self._ping()
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False

    async def wait_until_ready(self) -> None:
        """
        Ping MongoDB until it answers, with exponential backoff.

        Raises:
            DatabaseError: when every attempt failed.
        """
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(PyMongoError),
                stop=stop_after_attempt(self.connect_attempts),
                wait=wait_exponential_jitter(
                    initial=self.retry_min_wait,
                    max=self.retry_max_wait,
                    jitter=self.retry_min_wait,
                ),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    await self._ping()
        except PyMongoError as e:
            logger.error(
                "MongoDB unreachable after %d attempts: %s",
                self.connect_attempts,
                str(e),
            )
            raise DatabaseError(
                message="Could not connect to MongoDB.",
                context={"attempts": self.connect_attempts, "error_type": type(e).__name__},
            ) from e

        logger.info("MongoDB connection ready")

    async def _ping(self) -> None:
        await self.connect()
        await self._client.admin.command("ping")

    @staticmethod
    def map_document(document: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of `document` with `_id` exposed as a string `id`."""
        mapped = {key: value for key, value in document.items() if key != "_id"}
        mapped["id"] = str(document["_id"])
        return mapped
