"""
Authenticate Student Use Case

Verifies an email/password pair and hands out the student's security token.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from .dtos import AuthenticationResponse, StudentInfo


class AuthenticateStudentUseCase:
    """
    Use case for student login.

    Business Rules:
    - Same error for unknown email and wrong password
    - The current security token is returned, it is not rotated on login
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(self, email: str, password: str) -> Result[AuthenticationResponse]:
        async with self.uow:
            student = await self.uow.students.get_by_email(email)

            if student is None or not self.credentials.verify_password(student, password):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            return Return.ok(
                AuthenticationResponse(
                    security_token=student.security_token,
                    student=StudentInfo.from_entity(student),
                )
            )
