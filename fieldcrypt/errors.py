"""
Error taxonomy for field encryption.

Configuration errors are fatal at startup. Per-call errors are raised
synchronously and mapped to a response by the calling use-case.
"""


class CryptError(Exception):
    """Base class for all field encryption errors."""


class ConfigurationError(CryptError):
    """A secret is missing, malformed, too short or all-zero, or a setting is out of range."""


class InputTooLarge(CryptError):
    """Plaintext exceeds the maximum length accepted for encryption or hashing."""


class DecryptionFailure(CryptError):
    """An envelope could not be decrypted.

    Deliberately carries no detail about which step failed.
    """

    def __init__(self, message: str = "Failed to decrypt data"):
        super().__init__(message)
