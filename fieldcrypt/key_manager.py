"""
Key derivation for field encryption.

Per-purpose 256-bit keys are derived from the master secret with
HKDF-SHA256 and memoised for the lifetime of the KeyManager.
"""

import logging
import threading

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

logger = logging.getLogger(__name__)


class KeyManager:
    """Derives and caches PII and HMAC keys."""

    KEY_LEN = 32  # 256 bits
    HMAC_CACHE_KEY = "hmac"

    def __init__(self, master_key: bytes, derive_key: bytes, pii_secret: bytes, hmac_secret: bytes):
        """
        Initialize the key manager.

        Args:
            master_key: HKDF input key material
            derive_key: HKDF salt
            pii_secret: Purpose material for PII encryption keys
            hmac_secret: Purpose material for the lookup HMAC key
        """
        self._master_key = bytes(master_key)
        self._derive_key = bytes(derive_key)
        self._pii_secret = bytes(pii_secret)
        self._hmac_secret = bytes(hmac_secret)

        # cache key ("pii_<version>" / "hmac") -> derived key
        self._cache: dict[str, bytes] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> "KeyManager":
        """Build a key manager from a validated CryptConfig."""
        return cls(
            master_key=config.master_key,
            derive_key=config.derive_key,
            pii_secret=config.pii_secret,
            hmac_secret=config.hmac_secret,
        )

    @property
    def cached_keys(self) -> list[str]:
        """Names of the keys derived so far."""
        with self._lock:
            return sorted(self._cache)

    def derive(self, info: bytes) -> bytes:
        """
        Derive a 32-byte key for the given purpose material.

        Args:
            info: HKDF info parameter identifying the key's purpose

        Returns:
            The derived key
        """
        return HKDF(
            algorithm=hashes.SHA256(),
            length=self.KEY_LEN,
            salt=self._derive_key,
            info=info,
        ).derive(self._master_key)

    def pii_key(self, version: int) -> bytes:
        """Get the PII encryption key for a key version."""
        info = self._pii_secret + str(version).encode("utf-8")
        return self._get_or_derive(f"pii_{version}", info)

    def hmac_key(self) -> bytes:
        """Get the lookup HMAC key. Independent of the PII key version."""
        return self._get_or_derive(self.HMAC_CACHE_KEY, self._hmac_secret)

    def _get_or_derive(self, cache_key: str, info: bytes) -> bytes:
        with self._lock:
            key = self._cache.get(cache_key)
            if key is None:
                key = self.derive(info)
                self._cache[cache_key] = key
                logger.debug(f"Derived key {cache_key}")
            return key
