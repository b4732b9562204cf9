from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://dojang_user:dojang_password@db:5432/dojang_db"
    DATABASE_ECHO: bool = False
    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False

    SECRET_KEY: str = "SECRET_KEY_FOR_DOJANG"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Полная программа: 8 пумсэ Тхэгык
    TOTAL_POOMSAE_COUNT: int = 8
    MAX_SCORE_PER_ITEM: int = 2

    # Сдвиг времени занятий (Малайзия, UTC+8)
    SESSION_UTC_OFFSET_HOURS: int = 8

    DEFAULT_RESOURCE_LOCATION: str = "Johor Bahru, Malaysia"
    DEFAULT_RESOURCE_AUTHOR: str = "Lieyza Wahab"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
