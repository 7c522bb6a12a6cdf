"""
Domain Entities

Each entity in its own file.
"""

from .enums import UserType
from .credential_record import CredentialRecord
from .student import Student

__all__ = [
    # Enums
    "UserType",
    # Entities
    "CredentialRecord",
    "Student",
]
