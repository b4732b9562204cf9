from typing import List, Optional

from sqlalchemy import select

from app.models.belt_summary import BeltSummary
from app.repositories.base import BaseRepository


class BeltSummaryRepository(BaseRepository):
    async def get_by_name(self, belt_name: str) -> Optional[BeltSummary]:
        result = await self.db.execute(
            select(BeltSummary).where(BeltSummary.belt_name == belt_name)
        )
        return result.scalar_one_or_none()

    async def upsert(self, belt_name: str, average_percentage: int, trainee_count: int) -> BeltSummary:
        """Найти или создать сводку пояса и записать новые значения."""
        summary = await self.get_by_name(belt_name)
        if summary is None:
            summary = BeltSummary(belt_name=belt_name)
            self.db.add(summary)

        summary.average_percentage = average_percentage
        summary.trainee_count = trainee_count
        await self.commit()
        await self.db.refresh(summary)
        return summary
