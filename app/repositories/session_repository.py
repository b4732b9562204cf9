from typing import List, Optional

from sqlalchemy import select

from app.models.session import TrainingSession
from app.repositories.base import BaseRepository


class SessionRepository(BaseRepository):
    async def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        result = await self.db.execute(
            select(TrainingSession).where(TrainingSession.id == session_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> List[TrainingSession]:
        result = await self.db.execute(select(TrainingSession).order_by(TrainingSession.date.desc()))
        return list(result.scalars().all())

    async def create(self, training_session: TrainingSession) -> TrainingSession:
        self.db.add(training_session)
        await self.commit()
        await self.db.refresh(training_session)
        return training_session

    async def save(self, training_session: TrainingSession) -> TrainingSession:
        await self.commit()
        await self.db.refresh(training_session)
        return training_session
