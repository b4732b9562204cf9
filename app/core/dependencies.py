from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.config import settings
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.repositories.trainee_repository import TraineeRepository
from app.repositories.progress_repository import ProgressRepository
from app.repositories.belt_summary_repository import BeltSummaryRepository
from app.repositories.session_repository import SessionRepository
from app.repositories.post_repository import PostRepository
from app.repositories.resource_repository import ResourceRepository
from app.services.progress_service import ProgressService
from app.services.belt_service import BeltRingService


security = HTTPBearer()


# Фабрики репозиториев, инжектируются в эндпоинты через Depends.

def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_trainee_repository(db: AsyncSession = Depends(get_db)) -> TraineeRepository:
    return TraineeRepository(db)


def get_progress_repository(db: AsyncSession = Depends(get_db)) -> ProgressRepository:
    return ProgressRepository(db)


def get_belt_summary_repository(db: AsyncSession = Depends(get_db)) -> BeltSummaryRepository:
    return BeltSummaryRepository(db)


def get_session_repository(db: AsyncSession = Depends(get_db)) -> SessionRepository:
    return SessionRepository(db)


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    return PostRepository(db)


def get_resource_repository(db: AsyncSession = Depends(get_db)) -> ResourceRepository:
    return ResourceRepository(db)


def get_progress_service(
        repo: ProgressRepository = Depends(get_progress_repository),
) -> ProgressService:
    return ProgressService(
        repo,
        total_poomsae_count=settings.TOTAL_POOMSAE_COUNT,
        max_score_per_item=settings.MAX_SCORE_PER_ITEM,
    )


def get_belt_ring_service(
        trainee_repo: TraineeRepository = Depends(get_trainee_repository),
        progress_repo: ProgressRepository = Depends(get_progress_repository),
        summary_repo: BeltSummaryRepository = Depends(get_belt_summary_repository),
) -> BeltRingService:
    return BeltRingService(trainee_repo, progress_repo, summary_repo)


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid access token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
        user_id: str = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = await repo.get_by_id(int(user_id))
    if user is None:
        raise credentials_exception

    return user
