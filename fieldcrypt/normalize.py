"""
Input guard and normalisation shared by the cipher and the lookup hasher.

Both paths must normalise identically, otherwise a lookup digest computed
at search time would not match the one stored at write time.
"""

from .errors import InputTooLarge

MAX_INPUT_LENGTH = 10000


def check_length(value: str) -> None:
    """Raise InputTooLarge if the raw input exceeds MAX_INPUT_LENGTH characters."""
    if len(value) > MAX_INPUT_LENGTH:
        raise InputTooLarge("Input exceeds maximum allowed length")


def normalize(value: str) -> str:
    """Trim surrounding whitespace and lowercase.

    Lossy: case and padding do not survive an encrypt/decrypt round trip.
    """
    return value.strip().lower()


def prepare(value: str) -> str:
    """Length-check then normalise."""
    check_length(value)
    return normalize(value)
