import base64

import pytest

from fieldcrypt import CryptService, DecryptionFailure, InputTooLarge


def test_round_trip(crypt):
    assert crypt.decrypt_field(crypt.encrypt_field("  Jane@Example.com ")) == "jane@example.com"


def test_ciphertext_varies_index_does_not(crypt):
    first = crypt.encrypt_field("jane@example.com")
    second = crypt.encrypt_field("jane@example.com")
    assert first != second
    assert crypt.lookup_index(crypt.decrypt_field(first)) == crypt.lookup_index(crypt.decrypt_field(second))
    assert crypt.lookup_index("jane@example.com") == crypt.lookup_index("JANE@example.com")


def test_version_rotation(crypt):
    old = crypt.encrypt_field("jane@example.com")
    assert base64.b64decode(old)[0] == 1

    rotated = crypt.with_active_version(2)
    assert rotated.active_version == 2
    assert rotated.key_manager is crypt.key_manager

    assert rotated.decrypt_field(old) == "jane@example.com"
    new = rotated.encrypt_field("jane@example.com")
    assert base64.b64decode(new)[0] == 2
    assert rotated.decrypt_field(new) == "jane@example.com"
    assert crypt.decrypt_field(new) == "jane@example.com"


def test_rotation_with_fresh_service(crypt, crypt_config):
    old = crypt.encrypt_field("jane@example.com")
    fresh = CryptService(crypt_config.replace_active_version(2))
    assert fresh.decrypt_field(old) == "jane@example.com"


def test_lookup_index_survives_rotation(crypt):
    assert crypt.with_active_version(3).lookup_index("a@b.co") == crypt.lookup_index("a@b.co")


def test_errors_propagate(crypt):
    with pytest.raises(InputTooLarge):
        crypt.encrypt_field("x" * 10001)
    with pytest.raises(InputTooLarge):
        crypt.lookup_index("x" * 10001)
    with pytest.raises(DecryptionFailure):
        crypt.decrypt_field("AAAA")


def test_passwords(crypt):
    hashed = crypt.hash_password("secret")
    assert crypt.verify_password("secret", hashed) is True
    assert crypt.verify_password("secret2", hashed) is False


@pytest.mark.asyncio
async def test_passwords_async(crypt):
    hashed = await crypt.hash_password_async("secret")
    assert await crypt.verify_password_async("secret", hashed) is True
    assert await crypt.verify_password_async("secret2", hashed) is False


@pytest.mark.parametrize(
    "name",
    ["encrypt_field", "decrypt_field", "lookup_index", "hash_password", "verify_password",
     "hash_password_async", "verify_password_async", "with_active_version", "from_env"],
)
def test_public_operations_documented(name):
    assert getattr(CryptService, name).__doc__
