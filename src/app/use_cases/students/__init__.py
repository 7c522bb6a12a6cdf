"""
Student Use Cases

Account and credential business logic for students.
"""

from .register_student_use_case import RegisterStudentUseCase
from .authenticate_student_use_case import AuthenticateStudentUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .change_password_use_case import ChangePasswordUseCase
from .rotate_security_token_use_case import RotateSecurityTokenUseCase
from .get_student_use_case import GetStudentUseCase
from .dtos import (
    RegisterStudentCommand,
    StudentInfo,
    AuthenticationResponse,
    PasswordResetIssued,
    ConfirmPasswordResetResponse,
    ChangePasswordResponse,
    SecurityTokenResponse,
)

__all__ = [
    # Use Cases
    "RegisterStudentUseCase",
    "AuthenticateStudentUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "ChangePasswordUseCase",
    "RotateSecurityTokenUseCase",
    "GetStudentUseCase",
    # DTOs - Commands
    "RegisterStudentCommand",
    # DTOs - Responses
    "StudentInfo",
    "AuthenticationResponse",
    "PasswordResetIssued",
    "ConfirmPasswordResetResponse",
    "ChangePasswordResponse",
    "SecurityTokenResponse",
]
