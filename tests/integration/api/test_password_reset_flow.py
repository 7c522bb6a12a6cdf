"""
Integration tests for password reset request and confirmation
"""
from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.entities import Student


async def create_student_with_reset_token(
    db_session: AsyncSession,
    credentials,
    email: str = "reset@example.com",
    expired: bool = False,
) -> tuple[Student, str]:
    """
    Helper creating a student with a pending reset token.

    Returns:
        Tuple of (Student, plain_token)
    """
    student = Student.register(
        credentials,
        name="Reset",
        email=email,
        password="OldPass123!",
        curriculum="TI",
        profile_identifier=email.split("@")[0],
    )
    plain_token = credentials.issue_password_reset(student, email)
    if expired:
        student.reset_token_expiration = datetime.utcnow() - timedelta(hours=2)

    db_session.add(student)
    await db_session.commit()
    await db_session.refresh(student)
    return student, plain_token


async def login(client: AsyncClient, email: str, password: str):
    return await client.post("/students/login", json={"email": email, "password": password})


@pytest.mark.asyncio
async def test_request_password_reset_sets_pending_token(
    client: AsyncClient, db_session: AsyncSession, test_data
):
    payload = test_data.get_copy("second_student_registration")
    created = await client.post("/students", json=payload)
    student_id = created.json()["id"]

    response = await client.post("/students/password-reset", json={"email": payload["email"]})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "sent"
    assert "reset_token" not in data

    student = await db_session.get(Student, student_id)
    await db_session.refresh(student)
    assert student.reset_token is not None
    assert student.reset_salt is not None
    remaining = student.reset_token_expiration - datetime.utcnow()
    assert timedelta(minutes=55) < remaining <= timedelta(hours=1)


@pytest.mark.asyncio
async def test_request_password_reset_unknown_email(client: AsyncClient):
    response = await client.post(
        "/students/password-reset", json={"email": "nobody@example.com"}
    )

    assert response.status_code == 200
    assert response.json()["status"] == "sent"


@pytest.mark.asyncio
async def test_successful_confirmation(client: AsyncClient, db_session: AsyncSession, credentials):
    student, plain_token = await create_student_with_reset_token(db_session, credentials)
    old_security_token = student.security_token
    email = student.email

    response = await client.post(
        "/students/password-reset/confirm",
        json={"email": email, "token": plain_token, "new_password": "NewPass123!"},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "success"

    await db_session.refresh(student)
    assert student.reset_token is None
    assert student.security_token != old_security_token
    assert credentials.verify_password(student, "NewPass123!") is True

    assert (await login(client, email, "NewPass123!")).status_code == 200
    assert (await login(client, email, "OldPass123!")).status_code == 401

    stale = await client.get(
        "/students/me", headers={"Authorization": f"Bearer {old_security_token}"}
    )
    assert stale.status_code == 401


@pytest.mark.asyncio
async def test_token_is_single_use(client: AsyncClient, db_session: AsyncSession, credentials):
    student, plain_token = await create_student_with_reset_token(db_session, credentials)
    body = {"email": student.email, "token": plain_token, "new_password": "NewPass123!"}

    first = await client.post("/students/password-reset/confirm", json=body)
    second = await client.post("/students/password-reset/confirm", json=body)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_invalid_token(client: AsyncClient, db_session: AsyncSession, credentials):
    student, _ = await create_student_with_reset_token(db_session, credentials)

    response = await client.post(
        "/students/password-reset/confirm",
        json={"email": student.email, "token": "bm9wZQ==", "new_password": "NewPass123!"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"

    await db_session.refresh(student)
    assert student.reset_token is not None


@pytest.mark.asyncio
async def test_expired_token(client: AsyncClient, db_session: AsyncSession, credentials):
    student, plain_token = await create_student_with_reset_token(
        db_session, credentials, email="expired@example.com", expired=True
    )

    response = await client.post(
        "/students/password-reset/confirm",
        json={"email": student.email, "token": plain_token, "new_password": "NewPass123!"},
    )

    assert response.status_code == 410
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"

    # expired tokens are left in place, not cleared
    await db_session.refresh(student)
    assert student.reset_token is not None
    assert credentials.verify_password(student, "OldPass123!") is True


@pytest.mark.asyncio
async def test_expired_token_with_wrong_candidate(
    client: AsyncClient, db_session: AsyncSession, credentials
):
    student, _ = await create_student_with_reset_token(
        db_session, credentials, email="stale@example.com", expired=True
    )

    response = await client.post(
        "/students/password-reset/confirm",
        json={"email": student.email, "token": "garbage", "new_password": "NewPass123!"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
