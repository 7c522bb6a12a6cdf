import random
from datetime import datetime, timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.credentials import CredentialManager


class FakeClock:
    """Settable clock for reset-token expiration tests"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture
def credentials(clock):
    return CredentialManager(random_source=random.Random(1234), clock=clock)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.students = MagicMock()
    uow.students.get_by_id = AsyncMock(return_value=None)
    uow.students.get_by_email = AsyncMock(return_value=None)
    uow.students.get_by_profile_identifier = AsyncMock(return_value=None)
    uow.students.get_by_security_token = AsyncMock(return_value=None)
    uow.students.create = AsyncMock(side_effect=lambda student: student)
    uow.students.update = AsyncMock(side_effect=lambda student: student)
    return uow
