import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
import bcrypt
from jose import jwt, JWTError

from app.core.config import settings
from app.core.exceptions import ConflictError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import UserRegister

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self):
        self.SECRET_KEY = settings.SECRET_KEY
        self.REFRESH_SECRET_KEY = settings.SECRET_KEY + "_refresh"
        self.ALGORITHM = settings.ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
        self.REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')  # Декодируем bytes в string для хранения в БД

    def verify_password(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                plain_password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError:
            # Строка в БД не является bcrypt-хэшем
            return False

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None):
        to_encode = data.copy()
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode.update({"exp": expire})
        encoded_jwt = jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)
        return encoded_jwt

    def create_refresh_token(self, data: dict):
        to_encode = data.copy()
        expire = datetime.utcnow() + timedelta(days=self.REFRESH_TOKEN_EXPIRE_DAYS)
        to_encode.update({"exp": expire})
        encoded_jwt = jwt.encode(to_encode, self.REFRESH_SECRET_KEY, algorithm=self.ALGORITHM)
        return encoded_jwt

    async def issue_tokens(self, repo: UserRepository, user: User) -> Tuple[str, str]:
        """Выдать пару access/refresh и запомнить refresh у пользователя."""
        access_token = self.create_access_token(data={"sub": str(user.id)})
        refresh_token = self.create_refresh_token(data={"sub": str(user.id)})
        expires = datetime.utcnow() + timedelta(days=self.REFRESH_TOKEN_EXPIRE_DAYS)
        await repo.save_refresh_token(user, refresh_token, expires)
        return access_token, refresh_token

    async def verify_refresh_token(self, repo: UserRepository, refresh_token: str) -> Optional[User]:
        try:
            payload = jwt.decode(refresh_token, self.REFRESH_SECRET_KEY, algorithms=[self.ALGORITHM])
            user_id: str = payload.get("sub")
            if user_id is None:
                return None
        except JWTError:
            return None

        user = await repo.get_by_id(int(user_id))
        if (
            user
            and user.refresh_token == refresh_token
            and user.refresh_token_expires
            and user.refresh_token_expires > datetime.utcnow()
        ):
            return user
        return None

    async def authenticate_user(self, repo: UserRepository, email: str, password: str) -> Optional[User]:
        user = await repo.get_by_email(email.lower())

        if not user or not self.verify_password(password, user.password):
            return None

        return user

    async def register_user(self, repo: UserRepository, user_data: UserRegister) -> User:
        email = user_data.email.lower()
        if await repo.get_by_email(email):
            raise ConflictError("User already exists")

        new_user = User(
            name=user_data.name,
            email=email,
            password=self.hash_password(user_data.password),
            avatar="",
            created_at=datetime.utcnow()
        )

        user = await repo.create_user(new_user)
        logger.info(f"Зарегистрирован пользователь {user.email} (ID: {user.id})")
        return user


# Создаем экземпляр сервиса для импорта
auth_service = AuthService()
