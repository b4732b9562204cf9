import logging
from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user, get_user_repository
from app.core.exceptions import NotFoundError, PermissionDeniedError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[UserRead])
async def list_users(repo: UserRepository = Depends(get_user_repository)):
    """Все пользователи (без хэшей паролей)"""
    users = await repo.list_all()
    return [UserRead.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserRead)
async def get_profile(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    user = await repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
async def update_profile(
        user_id: int,
        profile: UserUpdate,
        current_user: User = Depends(get_current_user),
        repo: UserRepository = Depends(get_user_repository)
):
    """Обновить свой профиль; пустые значения игнорируются"""
    if current_user.id != user_id:
        raise PermissionDeniedError("You can only edit your own profile")

    for field, value in profile.model_dump(exclude_unset=True).items():
        if value:
            setattr(current_user, field, value)

    user = await repo.save(current_user)
    logger.info(f"Профиль обновлен: ID {user.id}")
    return UserRead.model_validate(user)
