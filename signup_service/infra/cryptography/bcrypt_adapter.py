"""
Sign-Up Service — bcrypt Password Hashing Adapter
===================================================

What:  Encrypter implementation backed by the `bcrypt` library.
How:   bcrypt.hashpw is CPU-bound and blocking, so it runs in a worker thread
       (asyncio.to_thread) under an asyncio.wait_for timeout.
Who:   Injected into DbAddAccount by the sign-up factory.

Work factor:
    `salt_rounds` is the bcrypt cost (log2 of the iteration count). 12 takes
    a few hundred milliseconds on current hardware.

bcrypt reads at most 72 bytes of a secret and bcrypt 5 raises ValueError
past that; SignUpController rejects longer passwords before they get here.
Other failures (invalid input, timeout) are not caught here.
"""

import asyncio
import logging
import time

import bcrypt

from signup_service.data.protocols import Encrypter

logger = logging.getLogger(__name__)


class BcryptAdapter(Encrypter):

    def __init__(self, salt_rounds: int, timeout: float = 10.0):
        self.salt_rounds = salt_rounds
        self.timeout = timeout

    async def encrypt(self, value: str) -> str:
        start_time = time.perf_counter()

        hashed = await asyncio.wait_for(
            asyncio.to_thread(self._hash, value),
            timeout=self.timeout,
        )

        logger.debug(
            "bcrypt hash (rounds=%d) computed in %.0fms",
            self.salt_rounds,
            (time.perf_counter() - start_time) * 1000,
        )
        return hashed

    def _hash(self, value: str) -> str:
        salt = bcrypt.gensalt(rounds=self.salt_rounds)
        return bcrypt.hashpw(value.encode("utf-8"), salt).decode("utf-8")
