import pytest

from fieldcrypt.config import CryptConfig
from fieldcrypt import CryptService, KeyManager

MASTER_KEY = "8f1c2a9e4b7d3f6a0c5e8b2d7f4a1c9e"
DERIVE_KEY = "a1b2c3d4e5f60718"
PII_SECRET = "0f1e2d3c4b5a6978"
HMAC_SECRET = "c0ffee00deadbeef1234"


@pytest.fixture
def env():
    """Environment mapping with valid secrets."""
    return {
        "MASTER_KEY": MASTER_KEY,
        "DERIVE_KEY": DERIVE_KEY,
        "PII_SECRET": PII_SECRET,
        "HMAC_SECRET": HMAC_SECRET,
        "PII_ACTIVE": "1",
        "SALT_ROUND": "10",
    }


@pytest.fixture
def crypt_config(env):
    return CryptConfig.from_env(env)


@pytest.fixture
def key_manager(crypt_config):
    return KeyManager.from_config(crypt_config)


@pytest.fixture
def crypt(crypt_config):
    return CryptService(crypt_config)
