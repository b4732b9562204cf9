from typing import List, Optional

from sqlalchemy import select

from app.models.trainee import Trainee
from app.repositories.base import BaseRepository


class TraineeRepository(BaseRepository):
    async def get_by_id(self, trainee_id: int) -> Optional[Trainee]:
        result = await self.db.execute(select(Trainee).where(Trainee.id == trainee_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str, exclude_id: Optional[int] = None) -> Optional[Trainee]:
        query = select(Trainee).where(Trainee.email == email)
        if exclude_id is not None:
            query = query.where(Trainee.id != exclude_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Trainee]:
        result = await self.db.execute(select(Trainee).order_by(Trainee.created_at.desc()))
        return list(result.scalars().all())

    async def list_by_belt(self, belt_name: str) -> List[Trainee]:
        """Ученики пояса: префикс без учета регистра ("white", "White" и т.п.)."""
        result = await self.db.execute(
            select(Trainee)
            .where(Trainee.belt.ilike(f"{belt_name}%"))
            .order_by(Trainee.id)
        )
        return list(result.scalars().all())

    async def create(self, trainee: Trainee) -> Trainee:
        self.db.add(trainee)
        await self.commit()
        await self.db.refresh(trainee)
        return trainee

    async def save(self, trainee: Trainee) -> Trainee:
        await self.commit()
        await self.db.refresh(trainee)
        return trainee

    async def delete(self, trainee: Trainee) -> None:
        await self.db.delete(trainee)
        await self.commit()
