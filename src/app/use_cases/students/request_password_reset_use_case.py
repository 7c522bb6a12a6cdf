"""
Request Password Reset Use Case

Issues a single-use reset token for the student owning an email address.
"""

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from .dtos import PasswordResetIssued

RESET_SENT_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Token is built from the email and 130 random bits, URL-safe encoded
    - Only the salted hash of the token is stored on the student
    - Token expires in 1 hour
    - A new request replaces any pending token
    - No email enumeration (same response for valid/invalid emails)
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(self, email: str) -> Result[PasswordResetIssued]:
        """
        Execute request password reset use case.

        Args:
            email: Student's email address

        Returns:
            Result with PasswordResetIssued. reset_token carries the
            plaintext token for out-of-band delivery, or None if the
            email is unknown.
        """
        async with self.uow:
            student = await self.uow.students.get_by_email(email)

            if student is None:
                return Return.ok(
                    PasswordResetIssued(status="sent", message=RESET_SENT_MESSAGE)
                )

            reset_token = self.credentials.issue_password_reset(student, student.email)
            student.touch()
            await self.uow.students.update(student)

            await self.uow.commit()

            return Return.ok(
                PasswordResetIssued(
                    status="sent",
                    message=RESET_SENT_MESSAGE,
                    reset_token=reset_token,
                )
            )
