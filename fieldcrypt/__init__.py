"""
Field-level PII encryption for the user backend.

Handles:
- Key derivation (HKDF-SHA256, versioned PII keys)
- Field encryption (AES-256-GCM envelopes)
- Blind index lookups (HMAC-SHA256)
- Password hashing (bcrypt)
"""

from .errors import CryptError, ConfigurationError, InputTooLarge, DecryptionFailure
from .config import CryptConfig
from .key_manager import KeyManager
from .envelope import Envelope, EnvelopeCipher
from .lookup import LookupHasher
from .password import PasswordHasher
from .service import CryptService

__all__ = [
    "CryptError",
    "ConfigurationError",
    "InputTooLarge",
    "DecryptionFailure",
    "KeyManager",
    "Envelope",
    "EnvelopeCipher",
    "LookupHasher",
    "PasswordHasher",
    "CryptService",
    "CryptConfig",
]
