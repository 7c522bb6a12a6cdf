"""
Confirm Password Reset Use Case

Consumes a reset token and sets a new password.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from .dtos import ConfirmPasswordResetResponse
from .password_policy import validate_password


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing with the reset salt and comparing
    - Token must not be expired (1 hour window)
    - Expiry is only reported for a matching token, anything else is INVALID_TOKEN
    - Token is single-use: cleared after a successful confirmation
    - A failed or expired attempt leaves the pending token in place
    - New password must not be empty
    - Security token is rotated so existing sessions stop working
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(
        self, email: str, token: str, new_password: str
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            email: Email address of the account
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_PASSWORD: New password is empty
            - INVALID_TOKEN: Unknown account, no pending token or mismatch
            - TOKEN_EXPIRED: Token has expired
        """
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            student = await self.uow.students.get_by_email(email)
            if student is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired password reset token")
                )

            if not self.credentials.validate_password_reset(student, token):
                if self.credentials.is_expired_reset_token(student, token):
                    return Return.err(
                        Error("TOKEN_EXPIRED", "Password reset token has expired")
                    )
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired password reset token")
                )

            self.credentials.change_password(student, new_password)
            self.credentials.change_security_token(student)
            student.touch()
            await self.uow.students.update(student)

            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
