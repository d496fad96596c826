"""
Versioned envelope encryption for PII fields.

Uses AES-256-GCM with a key derived per key version.
Envelope layout: version (1) + nonce (12) + tag (16) + ciphertext, base64-encoded.
"""

import os
import base64
import logging
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import DecryptionFailure
from .key_manager import KeyManager
from .normalize import prepare

logger = logging.getLogger(__name__)

NONCE_LEN = 12  # 96 bits for AES-GCM
TAG_LEN = 16  # 128 bits
HEADER_LEN = 1 + NONCE_LEN + TAG_LEN


@dataclass(frozen=True)
class Envelope:
    """An encrypted field value with the key version that produced it."""
    version: int
    nonce: bytes
    tag: bytes
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        """Serialize to the flat binary layout."""
        return bytes([self.version & 0xFF]) + self.nonce + self.tag + self.ciphertext

    @classmethod
    def from_bytes(cls, data: bytes) -> "Envelope":
        """
        Parse the flat binary layout.

        Raises:
            ValueError: If the buffer is shorter than the fixed header
        """
        if len(data) < HEADER_LEN:
            raise ValueError("Invalid cipher data")
        return cls(
            version=data[0],
            nonce=data[1:1 + NONCE_LEN],
            tag=data[1 + NONCE_LEN:HEADER_LEN],
            ciphertext=data[HEADER_LEN:],
        )

    def to_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def from_base64(cls, data: str) -> "Envelope":
        """
        Decode a base64 envelope.

        Raises:
            ValueError: If the text is not valid base64 or the buffer is too short
        """
        return cls.from_bytes(base64.b64decode(data, validate=True))


class EnvelopeCipher:
    """Encrypts and decrypts PII strings into versioned envelopes."""

    def __init__(self, key_manager: KeyManager, active_version: int):
        """
        Initialize the cipher.

        Args:
            key_manager: Source of per-version PII keys
            active_version: Key version used for new envelopes (1-255)
        """
        self.key_manager = key_manager
        self.active_version = active_version

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a value under the active key version.

        The value is trimmed and lowercased first.

        Args:
            plaintext: The value to protect

        Returns:
            The base64-encoded envelope

        Raises:
            InputTooLarge: If the value exceeds the maximum length
        """
        value = prepare(plaintext)

        nonce = os.urandom(NONCE_LEN)
        aesgcm = AESGCM(self.key_manager.pii_key(self.active_version))
        # AESGCM appends the tag to the ciphertext
        sealed = aesgcm.encrypt(nonce, value.encode("utf-8"), None)

        envelope = Envelope(
            version=self.active_version & 0xFF,
            nonce=nonce,
            tag=sealed[-TAG_LEN:],
            ciphertext=sealed[:-TAG_LEN],
        )
        return envelope.to_base64()

    def decrypt(self, data: str) -> str:
        """
        Decrypt an envelope with the key version recorded in its first byte.

        Args:
            data: The base64-encoded envelope

        Returns:
            The normalised plaintext

        Raises:
            DecryptionFailure: On any malformed, truncated or tampered envelope
        """
        try:
            envelope = Envelope.from_base64(data)
            if envelope.version == 0:
                raise ValueError("Invalid key version")
            aesgcm = AESGCM(self.key_manager.pii_key(envelope.version))
            plaintext = aesgcm.decrypt(envelope.nonce, envelope.ciphertext + envelope.tag, None)
            return plaintext.decode("utf-8")
        except Exception:
            logger.warning("Envelope decryption failed")
            raise DecryptionFailure() from None
