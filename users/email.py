"""
E-mail PII mapping for user records.

An e-mail is never stored in plaintext. Each user row carries:
- mask: display form (j*****@example.com)
- lookup: blind index for search-by-email (unique-indexable)
- blob: encrypted envelope
"""

from dataclasses import dataclass
from typing import Union

from pydantic import EmailStr, TypeAdapter, ValidationError

from fieldcrypt import CryptService

_email_adapter = TypeAdapter(EmailStr)
MASK = "*****"


@dataclass(frozen=True)
class UserEmail:
    """Normalised e-mail address value object."""
    value: str

    @classmethod
    def create(cls, raw: str) -> "UserEmail":
        """
        Normalise and validate an e-mail address.

        Raises:
            ValueError: If the address is not a valid e-mail address
        """
        try:
            value = _email_adapter.validate_python(raw.strip().lower())
        except ValidationError:
            raise ValueError("Invalid e-mail address") from None
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass
class EmailEmbed:
    """Persisted shape of an e-mail column group."""
    mask: str
    lookup: str
    blob: str

    def to_dict(self) -> dict[str, str]:
        return {"mask": self.mask, "lookup": self.lookup, "blob": self.blob}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "EmailEmbed":
        return cls(mask=data["mask"], lookup=data["lookup"], blob=data["blob"])


def mask_email(email: str) -> str:
    """Keep the first character and the domain; hide the rest of the local part."""
    at_index = email.rfind("@")
    if at_index < 1:
        return email
    return email[0] + MASK + email[at_index:]


class UserEmailMapper:
    """Converts between e-mail value objects and their persisted form."""

    def __init__(self, crypt: CryptService):
        self.crypt = crypt

    def to_embed(self, email: Union[UserEmail, str]) -> EmailEmbed:
        """Build the mask, lookup and blob columns for an address."""
        value = str(email)
        return EmailEmbed(
            mask=mask_email(value),
            lookup=self.crypt.lookup_index(value),
            blob=self.crypt.encrypt_field(value),
        )

    def from_embed(self, embed: EmailEmbed) -> UserEmail:
        """Decrypt a stored e-mail back into a value object."""
        return UserEmail.create(self.crypt.decrypt_field(embed.blob))

    def unmasked(self, embed: EmailEmbed) -> str:
        """Decrypt a stored e-mail for responses that may show it in full."""
        return self.crypt.decrypt_field(embed.blob)

    def to_response(self, email: Union[UserEmail, str]) -> str:
        return mask_email(str(email))

    def to_lookup(self, raw: str) -> str:
        """Blind index for a search-by-email query."""
        return self.crypt.lookup_index(raw)
