"""
Configuration for field encryption.

Secrets are supplied as hex strings through the environment and validated
eagerly. An invalid configuration raises ConfigurationError so the process
never serves traffic with broken crypto.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_PII_ACTIVE = 2
DEFAULT_SALT_ROUND = 10

MIN_SALT_ROUND = 10
MIN_PII_VERSION = 1
MAX_PII_VERSION = 255


def _decode_hex(value: Optional[str], name: str) -> bytes:
    """Decode a hex secret, raising ConfigurationError without echoing the value."""
    if value is None or not value.strip():
        raise ConfigurationError(f"{name} is required")
    try:
        return bytes.fromhex(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be a hex string") from None


def _parse_int(value: Optional[str], name: str, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer") from None


@dataclass(frozen=True)
class CryptConfig:
    """Validated key material and tuning for CryptService."""

    # Root of trust, HKDF input key material
    master_key: bytes
    # HKDF salt, process-wide constant
    derive_key: bytes
    # Purpose secrets (HKDF info)
    pii_secret: bytes
    hmac_secret: bytes

    # Key version embedded in every new envelope
    pii_active: int = DEFAULT_PII_ACTIVE
    # bcrypt work factor
    salt_round: int = DEFAULT_SALT_ROUND

    def __post_init__(self):
        """Validate every setting; fail fast on the first violation."""
        if isinstance(self.salt_round, bool) or not isinstance(self.salt_round, int) \
                or self.salt_round < MIN_SALT_ROUND:
            raise ConfigurationError(f"SALT_ROUND must be an integer >= {MIN_SALT_ROUND}")

        if isinstance(self.pii_active, bool) or not isinstance(self.pii_active, int) \
                or not MIN_PII_VERSION <= self.pii_active <= MAX_PII_VERSION:
            raise ConfigurationError(
                f"PII_ACTIVE must be an integer between {MIN_PII_VERSION} and {MAX_PII_VERSION}"
            )

        self._check_secret(self.master_key, "MASTER_KEY", 16)
        self._check_secret(self.derive_key, "DERIVE_KEY", 1)
        self._check_secret(self.pii_secret, "PII_SECRET", 8)
        self._check_secret(self.hmac_secret, "HMAC_SECRET", 8)

    @staticmethod
    def _check_secret(value: bytes, name: str, min_bytes: int) -> None:
        if not isinstance(value, (bytes, bytearray)) or len(value) == 0:
            raise ConfigurationError(f"{name} is required")
        if len(value) < min_bytes:
            raise ConfigurationError(
                f"{name} must be at least {min_bytes} bytes ({min_bytes * 2} hex characters)"
            )
        if not any(value):
            raise ConfigurationError(f"{name} must not be all zero bytes")

    @classmethod
    def from_hex(
        cls,
        master_key: str,
        derive_key: str,
        pii_secret: str,
        hmac_secret: str,
        pii_active: int = DEFAULT_PII_ACTIVE,
        salt_round: int = DEFAULT_SALT_ROUND,
    ) -> "CryptConfig":
        """Build a config from hex-encoded secrets."""
        return cls(
            master_key=_decode_hex(master_key, "MASTER_KEY"),
            derive_key=_decode_hex(derive_key, "DERIVE_KEY"),
            pii_secret=_decode_hex(pii_secret, "PII_SECRET"),
            hmac_secret=_decode_hex(hmac_secret, "HMAC_SECRET"),
            pii_active=pii_active,
            salt_round=salt_round,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CryptConfig":
        """
        Load the configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A validated CryptConfig

        Raises:
            ConfigurationError: If any variable is missing or invalid
        """
        env = os.environ if environ is None else environ
        return cls.from_hex(
            master_key=env.get("MASTER_KEY"),
            derive_key=env.get("DERIVE_KEY"),
            pii_secret=env.get("PII_SECRET"),
            hmac_secret=env.get("HMAC_SECRET"),
            pii_active=_parse_int(env.get("PII_ACTIVE"), "PII_ACTIVE", DEFAULT_PII_ACTIVE),
            salt_round=_parse_int(env.get("SALT_ROUND"), "SALT_ROUND", DEFAULT_SALT_ROUND),
        )

    def replace_active_version(self, version: int) -> "CryptConfig":
        """Return a copy that encrypts under a different key version."""
        return replace(self, pii_active=version)

    def __repr__(self) -> str:
        return f"CryptConfig(pii_active={self.pii_active}, salt_round={self.salt_round})"
