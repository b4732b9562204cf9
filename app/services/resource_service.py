import logging
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.models.resource import Resource, ResourceTypeEnum
from app.repositories.resource_repository import ResourceRepository
from app.schemas.resource import ResourceCreate

logger = logging.getLogger(__name__)

RESOURCE_TYPES = [t.value for t in ResourceTypeEnum]


class ResourceService:
    def __init__(self, repo: ResourceRepository):
        self.repo = repo

    async def create_resource(self, payload: ResourceCreate) -> Resource:
        title = (payload.title or "").strip()
        url = (payload.url or "").strip()
        resource_type = (payload.type or "").strip().title()

        if not title or not resource_type or not url:
            raise ValidationError("Title, type and url are required")
        if len(title) > 300:
            raise ValidationError("Title cannot exceed 300 characters")
        if resource_type not in RESOURCE_TYPES:
            raise ValidationError(f"Invalid resource type. Allowed: {', '.join(RESOURCE_TYPES)}")

        resource = Resource(
            title=title,
            type=resource_type,
            url=url,
            tags=list(payload.tags or []),
            location=payload.location or settings.DEFAULT_RESOURCE_LOCATION,
            author=payload.author or settings.DEFAULT_RESOURCE_AUTHOR,
            subtitle="Web Resource" if resource_type == ResourceTypeEnum.Link.value else "Community Post",
            description=payload.description or "",
        )
        resource = await self.repo.create(resource)
        logger.info(f"Ресурс {resource.id} добавлен ({resource_type})")
        return resource

    async def list_resources(
            self,
            search: Optional[str] = None,
            tag: Optional[str] = None,
            resource_type: Optional[str] = None,
    ) -> List[Resource]:
        # "All" в фильтре типа = без фильтра
        if resource_type and resource_type.strip().title() == "All":
            resource_type = None
        elif resource_type:
            resource_type = resource_type.strip().title()

        return await self.repo.list_filtered(
            search=(search or "").strip() or None,
            tag=(tag or "").strip() or None,
            resource_type=resource_type or None,
        )

    async def get_tags(self) -> List[str]:
        tags = await self.repo.distinct_tags()
        return sorted({tag for tag in tags if tag and tag.strip()})

    async def delete_resource(self, resource_id: int) -> None:
        resource = await self.repo.get_by_id(resource_id)
        if not resource:
            raise NotFoundError("Resource not found")
        await self.repo.delete(resource)
