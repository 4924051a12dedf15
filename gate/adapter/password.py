"""bcrypt password hashing adapter."""

import asyncio

import bcrypt
import logfire

from gate.adapter.error import PasswordHashingError
from gate.domain.service.password import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """PasswordHasher backed by bcrypt.

    bcrypt is CPU bound, so both operations run in a worker thread.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt cost factor (4-31)
        """
        self.rounds = rounds

    def _hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def _verify(self, digest: str, plaintext: str) -> bool:
        return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))

    async def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            PasswordHashingError: If bcrypt rejects the input
        """
        with logfire.span("bcrypt.hash", rounds=self.rounds):
            try:
                return await asyncio.to_thread(self._hash, plaintext)
            except ValueError as e:
                raise PasswordHashingError(f"Unable to hash password: {e}")

    async def verify(self, digest: str, plaintext: str) -> bool:
        """Check a password against a stored bcrypt digest.

        A digest that is not valid bcrypt output never matches.
        """
        with logfire.span("bcrypt.verify"):
            try:
                return await asyncio.to_thread(self._verify, digest, plaintext)
            except ValueError as e:
                logfire.warn("Stored digest rejected by bcrypt", error=str(e))
                return False
