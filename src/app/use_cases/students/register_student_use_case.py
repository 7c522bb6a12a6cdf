"""
Register Student Use Case

Creates a student account together with its credential record.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.credentials import CredentialManager
from src.domain.entities import Student
from .dtos import RegisterStudentCommand, StudentInfo
from .password_policy import validate_password


class RegisterStudentUseCase:
    """
    Use case for registering a student.

    Business Rules:
    - Password must not be empty
    - Email must be unique
    - Profile identifier must be unique
    - Salt, password hash and security token are generated on creation
    """

    def __init__(self, uow: UnitOfWork, credentials: CredentialManager):
        self.uow = uow
        self.credentials = credentials

    async def execute(self, command: RegisterStudentCommand) -> Result[StudentInfo]:
        """
        Execute register student use case.

        Args:
            command: Validated registration data

        Returns:
            Result with the created StudentInfo, or Error

        Errors:
            - INVALID_PASSWORD: Empty password
            - EMAIL_ALREADY_EXISTS: Email is taken
            - PROFILE_IDENTIFIER_TAKEN: Profile identifier is taken
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            if await self.uow.students.get_by_email(command.email) is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email is already registered")
                )

            existing = await self.uow.students.get_by_profile_identifier(
                command.profile_identifier
            )
            if existing is not None:
                return Return.err(
                    Error(
                        "PROFILE_IDENTIFIER_TAKEN",
                        "Profile identifier is already in use",
                    )
                )

            student = Student.register(
                self.credentials,
                name=command.name,
                email=command.email,
                password=command.password,
                curriculum=command.curriculum,
                profile_identifier=command.profile_identifier,
                user_type=command.user_type,
            )
            student = await self.uow.students.create(student)

            await self.uow.commit()

            return Return.ok(StudentInfo.from_entity(student))
