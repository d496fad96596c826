"""
Password hashing using bcrypt.

Passwords are hashed verbatim: no trimming or case folding.
"""

import asyncio
import logging

from passlib.context import CryptContext

from .config import MIN_SALT_ROUND
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted adaptive hashing for credential storage."""

    def __init__(self, rounds: int = MIN_SALT_ROUND):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)

        Raises:
            ConfigurationError: If rounds is below MIN_SALT_ROUND
        """
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < MIN_SALT_ROUND:
            raise ConfigurationError(f"SALT_ROUND must be an integer >= {MIN_SALT_ROUND}")

        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """
        Check a password against a stored hash.

        Returns:
            True on match, False on mismatch or an unrecognised hash
        """
        try:
            return self._context.verify(password, hashed)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be parsed")
            return False

    async def hash_async(self, password: str) -> str:
        """Hash in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, hashed: str) -> bool:
        """Verify in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.verify, password, hashed)
