import pytest

from fieldcrypt import PasswordHasher


@pytest.fixture(scope="module")
def hasher():
    return PasswordHasher(10)


@pytest.fixture(scope="module")
def secret_hash(hasher):
    return hasher.hash("secret")


def test_verify_match(hasher, secret_hash):
    assert hasher.verify("secret", secret_hash) is True


def test_verify_mismatch(hasher, secret_hash):
    assert hasher.verify("secret2", secret_hash) is False


def test_salted(hasher, secret_hash):
    other = hasher.hash("secret")
    assert other != secret_hash
    assert hasher.verify("secret", other) is True


def test_no_normalisation(hasher, secret_hash):
    assert hasher.verify("Secret", secret_hash) is False
    assert hasher.verify(" secret", secret_hash) is False


def test_work_factor_in_hash(hasher, secret_hash):
    assert secret_hash.startswith("$2b$10$")


def test_malformed_hash_returns_false(hasher):
    assert hasher.verify("secret", "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_async_variants(hasher):
    hashed = await hasher.hash_async("secret")
    assert await hasher.verify_async("secret", hashed) is True
    assert await hasher.verify_async("wrong", hashed) is False
