"""
Unit tests for RegisterStudentUseCase
"""
import pytest

from src.app.use_cases.students import RegisterStudentCommand, RegisterStudentUseCase
from src.domain.entities import Student, UserType
from tests.unit.helpers import make_student


def _command(**overrides):
    values = dict(
        name="David",
        email="david@example.com",
        password="paswoord",
        curriculum="TI",
        profile_identifier="david.op.de.beeck",
    )
    values.update(overrides)
    return RegisterStudentCommand(**values)


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, credentials):
    created = None

    async def capture_student(student):
        nonlocal created
        created = student
        student.id = 42
        return student

    mock_uow.students.create.side_effect = capture_student

    result = await RegisterStudentUseCase(mock_uow, credentials).execute(_command())

    assert result.is_ok()
    info = result.value
    assert info.id == 42
    assert info.email == "david@example.com"
    assert info.user_type == UserType.normal

    assert isinstance(created, Student)
    assert created.password != "paswoord"
    assert credentials.verify_password(created, "paswoord") is True
    assert created.salt is not None
    assert created.security_token is not None

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_student_info_has_no_credential_fields(mock_uow, credentials):
    async def assign_id(student):
        student.id = 1
        return student

    mock_uow.students.create.side_effect = assign_id

    result = await RegisterStudentUseCase(mock_uow, credentials).execute(_command())

    dumped = result.value.model_dump()
    for field in ("password", "salt", "security_token", "reset_token", "reset_salt"):
        assert field not in dumped


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["", "   "])
async def test_empty_password_rejected(mock_uow, credentials, password):
    result = await RegisterStudentUseCase(mock_uow, credentials).execute(
        _command(password=password)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.students.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_email(mock_uow, credentials):
    mock_uow.students.get_by_email.return_value = make_student(credentials)

    result = await RegisterStudentUseCase(mock_uow, credentials).execute(_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.students.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_profile_identifier(mock_uow, credentials):
    mock_uow.students.get_by_profile_identifier.return_value = make_student(
        credentials, email="other@example.com"
    )

    result = await RegisterStudentUseCase(mock_uow, credentials).execute(_command())

    assert result.is_err()
    assert result.error.code == "PROFILE_IDENTIFIER_TAKEN"
    mock_uow.students.create.assert_not_called()
