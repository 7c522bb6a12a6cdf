from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Student


class IStudentRepository(ABC):
    """Student repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, student_id: int) -> Optional[Student]:
        """Get student by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Student]:
        """Get student by email address"""
        pass

    @abstractmethod
    async def get_by_profile_identifier(self, profile_identifier: str) -> Optional[Student]:
        """Get student by profile identifier"""
        pass

    @abstractmethod
    async def get_by_security_token(self, security_token: str) -> Optional[Student]:
        """Get student by current security token"""
        pass

    @abstractmethod
    async def create(self, student: Student) -> Student:
        """Create a new student"""
        pass

    @abstractmethod
    async def update(self, student: Student) -> Student:
        """Update existing student"""
        pass

    @abstractmethod
    async def delete(self, student: Student) -> None:
        """Delete a student"""
        pass
