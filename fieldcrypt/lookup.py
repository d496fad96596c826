"""
Blind index for equality search over encrypted fields.
"""

import hmac
import hashlib

from .key_manager import KeyManager
from .normalize import prepare


class LookupHasher:
    """HMAC-SHA256 over the normalised value with a version-independent key."""

    def __init__(self, key_manager: KeyManager):
        self.key_manager = key_manager

    def index_for(self, plaintext: str) -> str:
        """
        Compute the lookup digest for a value.

        Args:
            plaintext: The value to index

        Returns:
            Hex-encoded HMAC-SHA256 digest (64 characters)

        Raises:
            InputTooLarge: If the value exceeds the maximum length
        """
        value = prepare(plaintext)
        return hmac.new(self.key_manager.hmac_key(), value.encode("utf-8"), hashlib.sha256).hexdigest()
