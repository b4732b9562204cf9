from typing import List, Optional

from sqlalchemy import select, func, or_

from app.models.resource import Resource
from app.repositories.base import BaseRepository
from app.repositories.search import like_pattern


class ResourceRepository(BaseRepository):
    async def get_by_id(self, resource_id: int) -> Optional[Resource]:
        result = await self.db.execute(select(Resource).where(Resource.id == resource_id))
        return result.scalar_one_or_none()

    async def list_filtered(
            self,
            search: Optional[str] = None,
            tag: Optional[str] = None,
            resource_type: Optional[str] = None,
    ) -> List[Resource]:
        query = select(Resource)

        if search:
            pattern = like_pattern(search)
            query = query.where(or_(
                Resource.title.ilike(pattern, escape="\\"),
                Resource.description.ilike(pattern, escape="\\"),
                func.array_to_string(Resource.tags, " ").ilike(pattern, escape="\\"),
            ))
        if tag:
            query = query.where(Resource.tags.any(tag))
        if resource_type:
            query = query.where(Resource.type == resource_type)

        result = await self.db.execute(query.order_by(Resource.created_at.desc()))
        return list(result.scalars().all())

    async def distinct_tags(self) -> List[str]:
        result = await self.db.execute(select(func.unnest(Resource.tags)).distinct())
        return list(result.scalars().all())

    async def create(self, resource: Resource) -> Resource:
        self.db.add(resource)
        await self.commit()
        await self.db.refresh(resource)
        return resource

    async def delete(self, resource: Resource) -> None:
        await self.db.delete(resource)
        await self.commit()
