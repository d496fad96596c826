"""
User record helpers.

Handles:
- E-mail normalisation and validation
- Mapping e-mails to masked, indexed and encrypted columns
"""

from .email import UserEmail, EmailEmbed, UserEmailMapper, mask_email

__all__ = ["UserEmail", "EmailEmbed", "UserEmailMapper", "mask_email"]
