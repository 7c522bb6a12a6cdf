"""
Get Student Use Case

Resolves the student behind a security token.
"""

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import StudentInfo


class GetStudentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, security_token: str) -> Result[StudentInfo]:
        async with self.uow:
            student = await self.uow.students.get_by_security_token(security_token)
            if student is None:
                return Return.err(
                    Error("INVALID_SECURITY_TOKEN", "Invalid security token")
                )

            return Return.ok(StudentInfo.from_entity(student))
