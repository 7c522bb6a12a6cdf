from functools import lru_cache

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.api.error import BEARER_CHALLENGE, ClientError
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.students import GetStudentUseCase, StudentInfo
from src.domain.credentials import CredentialManager, build_credential_manager

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache(maxsize=1)
def get_credential_manager() -> CredentialManager:
    return build_credential_manager(ApplicationConfig)


async def get_current_student(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow=Depends(get_unit_of_work),
) -> StudentInfo:
    """
    Dependency resolving the Bearer security token to a student.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        StudentInfo of the token owner

    Raises:
        ClientError: 401 INVALID_SECURITY_TOKEN with a Bearer challenge
    """
    result = await GetStudentUseCase(uow).execute(credentials.credentials)

    if result.is_err():
        raise ClientError(
            result.error,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers=BEARER_CHALLENGE,
        )

    return result.value
