"""
Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class UserType(str, Enum):
    """Account privilege level"""

    normal = "normal"
    admin = "admin"
