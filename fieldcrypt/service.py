"""
Field encryption service.

Facade over the key manager, envelope cipher, lookup hasher and password
hasher. Built once per process and injected into mappers and repositories.
"""

import logging
from typing import Optional

from .config import CryptConfig
from .envelope import EnvelopeCipher
from .key_manager import KeyManager
from .lookup import LookupHasher
from .password import PasswordHasher

logger = logging.getLogger(__name__)


class CryptService:
    """Encrypts, indexes and hashes PII and credentials."""

    def __init__(self, config: CryptConfig, key_manager: Optional[KeyManager] = None):
        """
        Initialize the service.

        Args:
            config: Validated configuration
            key_manager: Existing key manager to share its cache (optional)
        """
        self.config = config
        self.key_manager = key_manager or KeyManager.from_config(config)

        self._cipher = EnvelopeCipher(self.key_manager, config.pii_active)
        self._lookup = LookupHasher(self.key_manager)
        self._passwords = PasswordHasher(config.salt_round)

        logger.info(
            f"Crypt service ready (PII key version {config.pii_active}, "
            f"bcrypt rounds {config.salt_round})"
        )

    @classmethod
    def from_env(cls) -> "CryptService":
        """Build the service from environment variables."""
        return cls(CryptConfig.from_env())

    @property
    def active_version(self) -> int:
        """Key version embedded in new envelopes."""
        return self.config.pii_active

    def with_active_version(self, version: int) -> "CryptService":
        """
        Rotate to a new PII key version.

        The returned service shares this service's key manager, so keys
        already derived (including the HMAC key) are reused.

        Args:
            version: New active key version (1-255)

        Returns:
            A service encrypting under the new version
        """
        return CryptService(self.config.replace_active_version(version), self.key_manager)

    def encrypt_field(self, plaintext: str) -> str:
        """Encrypt a PII value into a base64 envelope."""
        return self._cipher.encrypt(plaintext)

    def decrypt_field(self, envelope: str) -> str:
        """Decrypt a base64 envelope back to its normalised plaintext."""
        return self._cipher.decrypt(envelope)

    def lookup_index(self, plaintext: str) -> str:
        """Compute the blind index used to search by plaintext."""
        return self._lookup.index_for(plaintext)

    def hash_password(self, raw: str) -> str:
        """Hash a raw password for storage."""
        return self._passwords.hash(raw)

    def verify_password(self, raw: str, hashed: str) -> bool:
        """Check a raw password against a stored hash."""
        return self._passwords.verify(raw, hashed)

    async def hash_password_async(self, raw: str) -> str:
        """Hash a raw password in a worker thread."""
        return await self._passwords.hash_async(raw)

    async def verify_password_async(self, raw: str, hashed: str) -> bool:
        """Check a raw password in a worker thread."""
        return await self._passwords.verify_async(raw, hashed)
