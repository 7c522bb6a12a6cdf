"""
Student Use Case DTOs (Data Transfer Objects)

Command and Response classes for the student account domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Student, UserType


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterStudentCommand(BaseModel):
    """Command to register a new student account"""

    name: str
    email: str
    password: str
    curriculum: str
    profile_identifier: str
    user_type: UserType = UserType.normal


# ============================================================================
# Response DTOs
# ============================================================================


class StudentInfo(BaseModel):
    """Public student profile, never includes credential fields"""

    id: int
    name: str
    email: str
    curriculum: str
    profile_identifier: str
    user_type: UserType
    last_updated: datetime

    @classmethod
    def from_entity(cls, student: Student) -> "StudentInfo":
        return cls(
            id=student.id,
            name=student.name,
            email=student.email,
            curriculum=student.curriculum,
            profile_identifier=student.profile_identifier,
            user_type=student.user_type,
            last_updated=student.last_updated,
        )


class AuthenticationResponse(BaseModel):
    """Response for student authentication use case"""

    security_token: str
    student: StudentInfo


class PasswordResetIssued(BaseModel):
    """
    Response for request password reset use case

    reset_token is the plaintext token to deliver out of band. It is None
    when the email is unknown and must never be echoed back to the caller.
    """

    status: str
    message: str
    reset_token: Optional[str] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str


class ChangePasswordResponse(BaseModel):
    """Response for change password use case"""

    status: str
    message: str


class SecurityTokenResponse(BaseModel):
    """Response for security token rotation use case"""

    security_token: str
