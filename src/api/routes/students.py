import logging

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.students import (
    AuthenticateStudentUseCase,
    AuthenticationResponse,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    RegisterStudentCommand,
    RegisterStudentUseCase,
    RequestPasswordResetUseCase,
    RotateSecurityTokenUseCase,
    SecurityTokenResponse,
    StudentInfo,
)
from src.domain.credentials import CredentialManager
from src.depends import get_credential_manager, get_current_student, get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"])


class RegisterStudentRequest(BaseModel):
    """
    Student registration HTTP request payload

    Validates incoming HTTP request before converting to RegisterStudentCommand.
    Self-registration always creates a normal account.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Student name")
    email: EmailStr = Field(..., description="Student email address")
    password: str = Field(..., min_length=1, description="Student password")
    curriculum: str = Field(..., min_length=1, max_length=64, description="Curriculum code")
    profile_identifier: str = Field(
        ..., min_length=1, max_length=255, description="Unique public profile handle"
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=StudentInfo)
async def register_student(
    request: RegisterStudentRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Register Student

    Raises:
        - 409 Conflict: Email or profile identifier already in use
        - 400 Bad Request: Empty password
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterStudentCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        curriculum=request.curriculum,
        profile_identifier=request.profile_identifier,
    )

    result = await RegisterStudentUseCase(uow, credentials).execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "PROFILE_IDENTIFIER_TAKEN"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Student email address")
    password: str = Field(..., description="Student password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthenticationResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Student Login

    Returns the security token to send as Bearer token on later requests.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    result = await AuthenticateStudentUseCase(uow, credentials).execute(
        request.email, request.password
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class PasswordResetRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address of the account")


class PasswordResetResponse(BaseModel):
    status: str
    message: str


@router.post(
    "/password-reset", status_code=status.HTTP_200_OK, response_model=PasswordResetResponse
)
async def request_password_reset(
    request: PasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Request Password Reset

    Always answers the same way whether or not the email is registered.
    The plaintext token is handed to out-of-band delivery, never returned here.
    """
    result = await RequestPasswordResetUseCase(uow, credentials).execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    issued = result.value
    if issued.reset_token is not None:
        # NOTE: mail delivery of the token is handled outside this service
        logger.debug("Password reset token issued")

    return PasswordResetResponse(status=issued.status, message=issued.message)


class ConfirmPasswordResetRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address of the account")
    token: str = Field(..., min_length=1, description="Reset token from the email")
    new_password: str = Field(..., min_length=1, description="New password")


@router.post(
    "/password-reset/confirm",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Invalid token or password
        - 410 Gone: Token expired
    """
    result = await ConfirmPasswordResetUseCase(uow, credentials).execute(
        request.email, request.token, request.new_password
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=StudentInfo)
async def me(current_student: StudentInfo = Depends(get_current_student)):
    return current_student


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., description="Current password")
    new_password: str = Field(..., min_length=1, description="New password")


@router.put(
    "/me/password", status_code=status.HTTP_200_OK, response_model=ChangePasswordResponse
)
async def change_password(
    request: ChangePasswordRequest,
    current_student: StudentInfo = Depends(get_current_student),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Change Password

    Raises:
        - 401 Unauthorized: Current password is wrong
        - 400 Bad Request: Empty new password
    """
    result = await ChangePasswordUseCase(uow, credentials).execute(
        current_student.id, request.current_password, request.new_password
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        if error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "STUDENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/me/security-token", status_code=status.HTTP_200_OK, response_model=SecurityTokenResponse
)
async def rotate_security_token(
    current_student: StudentInfo = Depends(get_current_student),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credentials: CredentialManager = Depends(get_credential_manager),
):
    """
    Rotate Security Token

    The previous token stops working immediately.
    """
    result = await RotateSecurityTokenUseCase(uow, credentials).execute(current_student.id)

    if result.is_err():
        error = result.error
        if error.code == "STUDENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
