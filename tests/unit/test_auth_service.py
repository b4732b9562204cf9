"""
Модульные тесты для AuthService.

Покрываемые методы:
- hash_password / verify_password
- create_access_token / create_refresh_token
- authenticate_user (email без учета регистра)
- register_user (дубликат email -> ConflictError)
- issue_tokens / verify_refresh_token
"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock
from jose import jwt

from app.services.auth_service import auth_service
from app.core.config import settings
from app.core.exceptions import ConflictError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import UserRegister

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# hash_password / verify_password
# ---------------------------------------------------------------------------

def test_hash_password_creates_valid_bcrypt_hash():
    """hash_password должен возвращать строку, начинающуюся с $2b$."""
    hashed = auth_service.hash_password("secret")
    assert isinstance(hashed, str)
    assert hashed.startswith("$2b$")


def test_verify_password_valid_and_wrong():
    hashed = auth_service.hash_password("correct_password")
    assert auth_service.verify_password("correct_password", hashed) is True
    assert auth_service.verify_password("wrong_password", hashed) is False


def test_verify_password_empty_or_broken_hash_returns_false():
    """Пустой хэш или строка не в формате bcrypt -> False, без исключения."""
    assert auth_service.verify_password("password", "") is False
    assert auth_service.verify_password("password", None) is False
    assert auth_service.verify_password("password", "plain-text") is False


# ---------------------------------------------------------------------------
# create_access_token / create_refresh_token
# ---------------------------------------------------------------------------

def test_create_access_token_contains_sub():
    token = auth_service.create_access_token(data={"sub": "42"})
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"] == "42"


def test_create_access_token_custom_expiry():
    token = auth_service.create_access_token(data={"sub": "1"}, expires_delta=timedelta(seconds=10))
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    exp = datetime.utcfromtimestamp(payload["exp"])
    assert exp < datetime.utcnow() + timedelta(seconds=20)


def test_refresh_token_is_signed_with_separate_key():
    """Refresh-токен не должен приниматься как access-токен."""
    token = auth_service.create_refresh_token(data={"sub": "7"})
    payload = jwt.decode(token, auth_service.REFRESH_SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"] == "7"
    with pytest.raises(Exception):
        jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


# ---------------------------------------------------------------------------
# authenticate_user
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_authenticate_user_success_lowercases_email():
    user = User(id=1, name="U", email="u@test.com", password=auth_service.hash_password("pass123"))
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_email.return_value = user

    result = await auth_service.authenticate_user(repo, "U@Test.com", "pass123")

    assert result == user
    repo.get_by_email.assert_awaited_once_with("u@test.com")


@pytest.mark.asyncio
async def test_authenticate_user_wrong_password_or_missing_user_returns_none():
    user = User(id=1, name="U", email="u@test.com", password=auth_service.hash_password("correct"))
    repo = AsyncMock(spec=UserRepository)

    repo.get_by_email.return_value = user
    assert await auth_service.authenticate_user(repo, "u@test.com", "wrong") is None

    repo.get_by_email.return_value = None
    assert await auth_service.authenticate_user(repo, "x@test.com", "any") is None


# ---------------------------------------------------------------------------
# register_user
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_register_user_existing_email_raises_conflict():
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_email.return_value = User(id=1, name="X", email="exists@test.com", password="h")

    with pytest.raises(ConflictError) as exc_info:
        await auth_service.register_user(
            repo, UserRegister(name="New", email="exists@test.com", password="pass123")
        )
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "User already exists"


@pytest.mark.asyncio
async def test_register_user_hashes_password_and_lowercases_email():
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_email.return_value = None
    repo.create_user.side_effect = lambda user: user

    result = await auth_service.register_user(
        repo, UserRegister(name="Newbie", email="New@Test.com", password="password123")
    )

    assert result.email == "new@test.com"
    assert result.password != "password123"
    assert auth_service.verify_password("password123", result.password)


# ---------------------------------------------------------------------------
# issue_tokens / verify_refresh_token
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_issue_tokens_stores_refresh_token():
    user = User(id=5, name="U", email="u@test.com", password="h")
    repo = AsyncMock(spec=UserRepository)

    access_token, refresh_token = await auth_service.issue_tokens(repo, user)

    assert access_token and refresh_token
    args = repo.save_refresh_token.await_args.args
    assert args[0] is user
    assert args[1] == refresh_token


@pytest.mark.asyncio
async def test_verify_refresh_token_accepts_only_stored_token():
    token = auth_service.create_refresh_token(data={"sub": "5"})
    user = User(
        id=5, name="U", email="u@test.com", password="h",
        refresh_token=token,
        refresh_token_expires=datetime.utcnow() + timedelta(days=1),
    )
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_id.return_value = user

    assert await auth_service.verify_refresh_token(repo, token) is user

    user.refresh_token = "another"
    assert await auth_service.verify_refresh_token(repo, token) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_expired_or_invalid_returns_none():
    token = auth_service.create_refresh_token(data={"sub": "5"})
    user = User(
        id=5, name="U", email="u@test.com", password="h",
        refresh_token=token,
        refresh_token_expires=datetime.utcnow() - timedelta(minutes=1),
    )
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_id.return_value = user

    assert await auth_service.verify_refresh_token(repo, token) is None
    assert await auth_service.verify_refresh_token(repo, "not-a-jwt") is None
