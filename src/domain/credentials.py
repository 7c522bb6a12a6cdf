"""
Credential & Token Manager

Owns the lifecycle of a credential record: password hashing and
verification, password-reset issuance and single-use validation, and
security-token rotation.

Wrong passwords and wrong, expired or absent reset tokens are reported as
``False``; nothing here raises for an ordinary credential mismatch.
"""

import base64
import hashlib
import logging
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from random import Random
from typing import Callable, Dict, Optional, Type

import bcrypt

from src.domain.entities import CredentialRecord

logger = logging.getLogger(__name__)

RANDOM_BITS = 130
RANDOM_RADIX = 20
DEFAULT_RESET_TOKEN_TTL = timedelta(hours=1)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class CredentialConfigurationError(Exception):
    """Raised at startup when the configured password hasher is unusable"""


def to_radix(value: int, radix: int) -> str:
    """Render a non-negative integer in the given radix (2-36), lowercase digits"""
    if not 2 <= radix <= len(_DIGITS):
        raise ValueError(f"Unsupported radix: {radix}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


class PasswordHasher(ABC):
    """Deterministic one-way function of (plaintext, salt)"""

    name: str

    @abstractmethod
    def hash(self, plain_text: str, salt: Optional[str]) -> str:
        pass


class Sha512Hasher(PasswordHasher):
    """
    SHA-512 over plaintext bytes followed by salt bytes.

    The digest is read as an unsigned big-endian integer and stored in
    decimal, which is the format of the hashes already in the student table.
    """

    name = "sha512"

    def hash(self, plain_text: str, salt: Optional[str]) -> str:
        digest = hashlib.sha512()
        digest.update(plain_text.encode("utf-8"))
        if salt is not None:
            digest.update(salt.encode("utf-8"))
        return str(int.from_bytes(digest.digest(), "big"))


class BcryptKdfHasher(PasswordHasher):
    """Slow hash based on bcrypt_pbkdf, hex encoded"""

    name = "bcrypt"

    def __init__(self, rounds: int = 50, key_bytes: int = 64):
        self.rounds = rounds
        self.key_bytes = key_bytes

    def hash(self, plain_text: str, salt: Optional[str]) -> str:
        # salt is appended to the password so an empty plaintext is still hashable
        salt_bytes = (salt or "").encode("utf-8")
        key = bcrypt.kdf(
            password=plain_text.encode("utf-8") + salt_bytes,
            salt=salt_bytes or b"\x00",
            desired_key_bytes=self.key_bytes,
            rounds=self.rounds,
        )
        return key.hex()


HASHERS: Dict[str, Type[PasswordHasher]] = {
    Sha512Hasher.name: Sha512Hasher,
    BcryptKdfHasher.name: BcryptKdfHasher,
}


class CredentialManager:
    """
    Credential & token manager.

    Business Rules:
    - Salts, security tokens and reset-token randomness are 130 random bits
      rendered in base 20
    - A reset token expires 1 hour after issuance and is valid only once
    - Expired reset tokens are not cleared, they simply fail validation
    - A None plaintext password produces a None hash; rejecting empty
      passwords belongs to input validation
    """

    def __init__(
        self,
        hasher: Optional[PasswordHasher] = None,
        random_source: Optional[Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        reset_token_ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
    ):
        self.hasher = hasher or Sha512Hasher()
        self.random_source = random_source or secrets.SystemRandom()
        self.clock = clock or datetime.utcnow
        self.reset_token_ttl = reset_token_ttl

    def random_string(self) -> str:
        return to_radix(self.random_source.getrandbits(RANDOM_BITS), RANDOM_RADIX)

    def hash(self, plain_text: Optional[str], salt: Optional[str]) -> Optional[str]:
        if plain_text is None:
            return None
        return self.hasher.hash(plain_text, salt)

    def create(self, plain_text_password: Optional[str]) -> CredentialRecord:
        """
        Create a credential record for a new account.

        Args:
            plain_text_password: Password chosen by the account owner

        Returns:
            CredentialRecord with a fresh salt, hash and security token
        """
        salt = self.random_string()
        return CredentialRecord(
            password=self.hash(plain_text_password, salt),
            salt=salt,
            security_token=self.random_string(),
        )

    def verify_password(
        self, record: CredentialRecord, plain_text_candidate: Optional[str]
    ) -> bool:
        if plain_text_candidate is None or record.password is None:
            return False
        return self.hash(plain_text_candidate, record.salt) == record.password

    def change_password(
        self, record: CredentialRecord, new_plain_text_password: Optional[str]
    ) -> None:
        if record.salt is None:
            record.salt = self.random_string()
        record.password = self.hash(new_plain_text_password, record.salt)

    def issue_password_reset(
        self, record: CredentialRecord, account_identifier: str
    ) -> str:
        """
        Issue a single-use password reset token.

        Only the hash of the token is kept on the record; the returned
        plaintext has to be delivered to the account owner out of band.

        Args:
            record: Credential record to arm
            account_identifier: Email address of the account

        Returns:
            URL-safe plaintext reset token
        """
        record.reset_token_expiration = self.clock() + self.reset_token_ttl
        record.reset_salt = self.random_string()

        plain_text_token = account_identifier + self.random_string()
        plain_text_token = base64.urlsafe_b64encode(
            plain_text_token.encode("utf-8")
        ).decode("ascii")

        record.reset_token = self.hash(plain_text_token, record.reset_salt)
        return plain_text_token

    def validate_password_reset(
        self, record: CredentialRecord, plain_text_candidate: Optional[str]
    ) -> bool:
        """
        Check a reset token, consuming it on success.

        Returns:
            True if the token matches and has not expired; the pending
            token is cleared. False otherwise, leaving the record untouched.
        """
        if (
            record.reset_token is None
            or plain_text_candidate is None
            or record.reset_token_expiration is None
        ):
            return False

        if self.clock() >= record.reset_token_expiration:
            return False

        valid = self.hash(plain_text_candidate, record.reset_salt) == record.reset_token
        if valid:
            record.reset_token = None
        return valid

    def is_expired_reset_token(
        self, record: CredentialRecord, plain_text_candidate: Optional[str]
    ) -> bool:
        """True if the candidate matches the pending reset token but it has expired"""
        if (
            record.reset_token is None
            or plain_text_candidate is None
            or record.reset_token_expiration is None
        ):
            return False

        if self.clock() < record.reset_token_expiration:
            return False

        return self.hash(plain_text_candidate, record.reset_salt) == record.reset_token

    def change_security_token(self, record: CredentialRecord) -> None:
        record.security_token = self.random_string()


def build_credential_manager(config) -> CredentialManager:
    """
    Build the process-wide credential manager from application config.

    Raises:
        CredentialConfigurationError: unknown PASSWORD_HASHER or bad settings
    """
    hasher_name = str(config.PASSWORD_HASHER).lower()
    hasher_cls = HASHERS.get(hasher_name)
    if hasher_cls is None:
        raise CredentialConfigurationError(
            f"Unsupported password hasher '{config.PASSWORD_HASHER}', "
            f"expected one of: {', '.join(sorted(HASHERS))}"
        )

    if hasher_cls is BcryptKdfHasher:
        rounds = int(config.BCRYPT_KDF_ROUNDS)
        if rounds < 1:
            raise CredentialConfigurationError("BCRYPT_KDF_ROUNDS must be positive")
        hasher = BcryptKdfHasher(rounds=rounds)
    else:
        hasher = hasher_cls()

    ttl_minutes = int(config.RESET_TOKEN_TTL_MINUTES)
    if ttl_minutes < 1:
        raise CredentialConfigurationError("RESET_TOKEN_TTL_MINUTES must be positive")

    logger.info(
        "Credential manager configured: hasher=%s reset_ttl=%smin",
        hasher.name,
        ttl_minutes,
    )
    return CredentialManager(
        hasher=hasher, reset_token_ttl=timedelta(minutes=ttl_minutes)
    )
