"""
Generate fresh secrets for the field encryption configuration.

Prints lines in .env format:

    fieldcrypt-keygen >> .env
"""

import secrets

from .config import DEFAULT_PII_ACTIVE, DEFAULT_SALT_ROUND

# Byte lengths, all above the configuration minimums
SECRET_LENGTHS = {
    "MASTER_KEY": 32,
    "DERIVE_KEY": 16,
    "PII_SECRET": 16,
    "HMAC_SECRET": 32,
}


def generate_secrets() -> dict[str, str]:
    """Generate hex-encoded random secrets plus default tuning values."""
    values = {name: secrets.token_hex(length) for name, length in SECRET_LENGTHS.items()}
    values["PII_ACTIVE"] = str(DEFAULT_PII_ACTIVE)
    values["SALT_ROUND"] = str(DEFAULT_SALT_ROUND)
    return values


def main():
    for name, value in generate_secrets().items():
        print(f"{name}={value}")


if __name__ == "__main__":
    main()
