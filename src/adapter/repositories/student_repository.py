from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.student_repository import IStudentRepository
from src.domain.entities import Student


class StudentRepository(IStudentRepository):
    """Student repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, student_id: int) -> Optional[Student]:
        stmt = select(Student).where(Student.id == student_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Student]:
        stmt = select(Student).where(Student.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_profile_identifier(self, profile_identifier: str) -> Optional[Student]:
        stmt = select(Student).where(Student.profile_identifier == profile_identifier)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_security_token(self, security_token: str) -> Optional[Student]:
        stmt = select(Student).where(Student.security_token == security_token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, student: Student) -> Student:
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student

    async def update(self, student: Student) -> Student:
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student

    async def delete(self, student: Student) -> None:
        await self.session.delete(student)
        await self.session.flush()
