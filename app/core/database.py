import logging

from app.core.config import settings
from app.core.base import Base
from app.core.db import engine

# Импортируем ВСЕ модели, чтобы они попали в Base.metadata
from app.models.user import User
from app.models.trainee import Trainee
from app.models.session import TrainingSession
from app.models.progress import TraineeProgress, FormRecord
from app.models.belt_summary import BeltSummary
from app.models.post import Post, PostLike, PostComment
from app.models.resource import Resource

logger = logging.getLogger(__name__)


async def init_database():
    """Инициализация базы данных"""
    async with engine.begin() as conn:
        # Удаляем все таблицы если RESET_DATABASE=true
        if settings.RESET_DATABASE:
            logger.warning("RESET_DATABASE=true - пересоздаем БД")
            await conn.run_sync(Base.metadata.drop_all)

        # Создаем все таблицы
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы БД созданы/проверены")
