"""
Общие фикстуры для тестов Dojang backend.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- Все репозитории заменяются на AsyncMock через dependency_overrides,
  поэтому сервисы работают по-настоящему, а БД - нет.
- JWT-токены создаются через auth_service.create_access_token() и проходят
  настоящую проверку в get_current_user (пользователь берётся из mock_user_repo).
"""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime
from typing import AsyncGenerator

from app.api.router import api_router
from app.core.error_handlers import register_exception_handlers
from app.models.user import User
from app.services.auth_service import auth_service
from app.repositories.user_repository import UserRepository
from app.repositories.trainee_repository import TraineeRepository
from app.repositories.progress_repository import ProgressRepository
from app.repositories.belt_summary_repository import BeltSummaryRepository
from app.repositories.session_repository import SessionRepository
from app.repositories.post_repository import PostRepository
from app.repositories.resource_repository import ResourceRepository
from app.core.dependencies import (
    get_user_repository,
    get_trainee_repository,
    get_progress_repository,
    get_belt_summary_repository,
    get_session_repository,
    get_post_repository,
    get_resource_repository,
)


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="Dojang Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api")
    return test_app


def make_auth_headers(user: User) -> dict:
    """Создать заголовки авторизации с валидным JWT для указанного пользователя."""
    access_token = auth_service.create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {access_token}"}


# ---------------------------------------------------------------------------
# Фикстуры пользователей
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    """Тренер, от имени которого идут запросы."""
    return User(
        id=1,
        name="Lieyza",
        email="coach@example.com",
        avatar="https://example.com/coach.png",
        password=auth_service.hash_password("password123"),
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def other_user_fixture() -> User:
    return User(
        id=2,
        name="Other",
        email="other@example.com",
        avatar="",
        password=auth_service.hash_password("password456"),
        created_at=datetime.utcnow(),
    )


# ---------------------------------------------------------------------------
# Мокированные репозитории
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_repo() -> AsyncMock:
    """Мокированный UserRepository (auth, users, get_current_user)."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_trainee_repo() -> AsyncMock:
    return AsyncMock(spec=TraineeRepository)


@pytest.fixture
def mock_progress_repo() -> AsyncMock:
    return AsyncMock(spec=ProgressRepository)


@pytest.fixture
def mock_summary_repo() -> AsyncMock:
    return AsyncMock(spec=BeltSummaryRepository)


@pytest.fixture
def mock_session_repo() -> AsyncMock:
    return AsyncMock(spec=SessionRepository)


@pytest.fixture
def mock_post_repo() -> AsyncMock:
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def mock_resource_repo() -> AsyncMock:
    return AsyncMock(spec=ResourceRepository)


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
def test_app(
        mock_repo,
        mock_trainee_repo,
        mock_progress_repo,
        mock_summary_repo,
        mock_session_repo,
        mock_post_repo,
        mock_resource_repo,
) -> FastAPI:
    app = create_test_app()
    app.dependency_overrides[get_user_repository] = lambda: mock_repo
    app.dependency_overrides[get_trainee_repository] = lambda: mock_trainee_repo
    app.dependency_overrides[get_progress_repository] = lambda: mock_progress_repo
    app.dependency_overrides[get_belt_summary_repository] = lambda: mock_summary_repo
    app.dependency_overrides[get_session_repository] = lambda: mock_session_repo
    app.dependency_overrides[get_post_repository] = lambda: mock_post_repo
    app.dependency_overrides[get_resource_repository] = lambda: mock_resource_repo
    return app


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Клиент без авторизации; все репозитории - AsyncMock."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(test_app, mock_repo, user_fixture) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент с Bearer-токеном user_fixture.
    get_current_user проверяет токен и находит пользователя через mock_repo.get_by_id.
    """
    mock_repo.get_by_id.return_value = user_fixture
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
        headers=make_auth_headers(user_fixture),
    ) as ac:
        yield ac
