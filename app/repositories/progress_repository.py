from typing import List, Optional, Sequence

from sqlalchemy import select

from app.models.progress import TraineeProgress
from app.repositories.base import BaseRepository


class ProgressRepository(BaseRepository):
    async def get_by_trainee(self, trainee_id: int) -> Optional[TraineeProgress]:
        result = await self.db.execute(
            select(TraineeProgress).where(TraineeProgress.trainee_id == trainee_id)
        )
        return result.scalar_one_or_none()

    async def list_by_trainees(self, trainee_ids: Sequence[int]) -> List[TraineeProgress]:
        if not trainee_ids:
            return []
        result = await self.db.execute(
            select(TraineeProgress).where(TraineeProgress.trainee_id.in_(list(trainee_ids)))
        )
        return list(result.scalars().all())

    async def save(self, progress: TraineeProgress) -> TraineeProgress:
        """Создать или обновить документ прогресса целиком (вместе с формами)."""
        self.db.add(progress)
        await self.commit()
        return progress
