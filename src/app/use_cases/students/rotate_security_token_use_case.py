"""
Rotate Security Token Use Case

Invalidates every outstanding reference to the current security token.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from .dtos import SecurityTokenResponse


class RotateSecurityTokenUseCase:
    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(self, student_id: int) -> Result[SecurityTokenResponse]:
        async with self.uow:
            student = await self.uow.students.get_by_id(student_id)
            if student is None:
                return Return.err(Error("STUDENT_NOT_FOUND", "Student not found"))

            self.credentials.change_security_token(student)
            student.touch()
            await self.uow.students.update(student)

            await self.uow.commit()

            return Return.ok(
                SecurityTokenResponse(security_token=student.security_token)
            )
