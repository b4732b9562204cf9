from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user, get_user_repository
from app.core.exceptions import ValidationError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.services.auth_service import auth_service
from app.schemas.auth import (
    UserLogin, UserRegister, AuthResponse, RegisterResponse, LoginResponse, RefreshTokenRequest
)
from app.schemas.user import UserRead

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserRegister, repo: UserRepository = Depends(get_user_repository)):
    """Регистрация нового пользователя и выдача JWT токенов"""
    new_user = await auth_service.register_user(repo, user)
    access_token, refresh_token = await auth_service.issue_tokens(repo, new_user)

    return RegisterResponse(
        msg="User registered successfully",
        user=UserRead.model_validate(new_user),
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="bearer"
    )


@router.post("/login", response_model=LoginResponse)
async def login(user: UserLogin, repo: UserRepository = Depends(get_user_repository)):
    """Аутентификация пользователя и выдача JWT токенов"""
    authenticated_user = await auth_service.authenticate_user(repo, user.email, user.password)
    if not authenticated_user:
        raise ValidationError("Invalid Credentials")

    access_token, refresh_token = await auth_service.issue_tokens(repo, authenticated_user)

    return LoginResponse(
        msg="Login successful",
        email=authenticated_user.email,
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="bearer"
    )


@router.post("/refresh", response_model=AuthResponse)
async def refresh_token(request: RefreshTokenRequest, repo: UserRepository = Depends(get_user_repository)):
    """Обновление access token с помощью refresh token"""
    user = await auth_service.verify_refresh_token(repo, request.refresh_token)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token"
        )

    access_token = auth_service.create_access_token(data={"sub": str(user.id)})

    return AuthResponse(
        access_token=access_token,
        refresh_token=request.refresh_token,
        token_type="bearer"
    )


@router.get("/me", response_model=UserRead)
async def get_me(current_user: User = Depends(get_current_user)):
    return UserRead.model_validate(current_user)
