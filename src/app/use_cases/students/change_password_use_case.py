"""
Change Password Use Case
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from .dtos import ChangePasswordResponse
from .password_policy import validate_password


class ChangePasswordUseCase:
    """
    Use case for an authenticated student changing their password.

    Business Rules:
    - Current password must be verified first
    - Existing salt is kept; security token and reset state are untouched
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(
        self, student_id: int, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            student = await self.uow.students.get_by_id(student_id)
            if student is None:
                return Return.err(Error("STUDENT_NOT_FOUND", "Student not found"))

            if not self.credentials.verify_password(student, current_password):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Current password is incorrect")
                )

            self.credentials.change_password(student, new_password)
            student.touch()
            await self.uow.students.update(student)

            await self.uow.commit()

            return Return.ok(
                ChangePasswordResponse(
                    status="success", message="Password has been changed"
                )
            )
