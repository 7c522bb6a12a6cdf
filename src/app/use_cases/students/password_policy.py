"""
Password input validation.

CredentialManager accepts any plaintext; empty passwords are rejected here,
before a use case reaches it.
"""

from typing import Optional

from src.libs.result import Error, Result, Return


def validate_password(password: Optional[str]) -> Result[None]:
    if password is None or not password.strip():
        return Return.err(Error("INVALID_PASSWORD", "Password must not be empty"))
    return Return.ok(None)
