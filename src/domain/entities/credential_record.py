"""
CredentialRecord

Password, reset-token and security-token state owned by an account.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import DateTime, Field, SQLModel


class CredentialRecord(SQLModel):
    """
    Credential state of an account.

    Business Rules:
    - password is the salted hash of the current password, never plaintext
    - salt is generated once and reused for every password change
    - reset_token/reset_salt are issued together, reset_token is single-use
    - reset_token is invalid at or after reset_token_expiration
    - security_token is never null and unique across accounts
    """

    password: Optional[str] = Field(default=None, max_length=255)
    salt: Optional[str] = Field(default=None, max_length=64)

    # Password reset (single-use, expires after 1 hour)
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=255
    )
    reset_salt: Optional[str] = Field(default=None, max_length=64)
    # naive UTC, compared against CredentialManager.clock
    reset_token_expiration: Optional[datetime] = Field(default=None, sa_type=DateTime)

    security_token: str = Field(unique=True, index=True, max_length=64)
