import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def commit(self) -> None:
        """Зафиксировать транзакцию; при ошибке БД откатить и поднять PersistenceError."""
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error(f"Ошибка при сохранении в БД: {exc}")
            raise PersistenceError() from exc
