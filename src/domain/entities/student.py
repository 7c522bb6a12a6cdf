"""
Student Entity

Represents a student account of the peer-tutoring application.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING

from sqlmodel import Column, DateTime, Field

from .credential_record import CredentialRecord
from .enums import UserType

if TYPE_CHECKING:
    from src.domain.credentials import CredentialManager


class Student(CredentialRecord, table=True):
    """
    Student entity - an account that can subscribe to courses and book lessons.

    Business Rules:
    - Email must be unique across all students
    - Profile identifier must be unique across all students
    - Credential columns are managed exclusively by CredentialManager
    - last_updated is refreshed on every credential change
    """

    __tablename__ = "student"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    curriculum: str = Field(max_length=64)
    profile_identifier: str = Field(unique=True, index=True, max_length=255)
    user_type: UserType = Field(default=UserType.normal)

    last_updated: datetime = Field(
        default_factory=datetime.utcnow, sa_column=Column(DateTime)
    )

    @classmethod
    def register(
        cls,
        credentials: "CredentialManager",
        *,
        name: str,
        email: str,
        password: Optional[str],
        curriculum: str,
        profile_identifier: str,
        user_type: UserType = UserType.normal,
    ) -> "Student":
        """Build a new student with a freshly generated credential record"""
        record = credentials.create(password)
        return cls(
            name=name,
            email=email,
            curriculum=curriculum,
            profile_identifier=profile_identifier,
            user_type=user_type,
            **record.model_dump(),
        )

    def touch(self) -> None:
        self.last_updated = datetime.utcnow()
