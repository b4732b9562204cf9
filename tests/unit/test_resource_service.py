"""
Модульные тесты для ResourceService.

Покрываемые сценарии:
- тип в Title Case, подзаголовок по типу
- значения location/author по умолчанию из настроек
- обязательные поля и допустимые типы
- фильтр "All" в списке
"""

import pytest
from unittest.mock import AsyncMock

from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.repositories.resource_repository import ResourceRepository
from app.schemas.resource import ResourceCreate
from app.services.resource_service import ResourceService

pytestmark = pytest.mark.unit


@pytest.fixture
def resource_repo() -> AsyncMock:
    repo = AsyncMock(spec=ResourceRepository)
    repo.create.side_effect = lambda r: r
    repo.list_filtered.return_value = []
    return repo


@pytest.mark.asyncio
async def test_create_link_resource_defaults(resource_repo):
    resource = await ResourceService(resource_repo).create_resource(
        ResourceCreate(title="Kicks 101", type="link", url="https://example.com", tags="kick, basics")
    )

    assert resource.type == "Link"
    assert resource.subtitle == "Web Resource"
    assert resource.location == settings.DEFAULT_RESOURCE_LOCATION
    assert resource.author == settings.DEFAULT_RESOURCE_AUTHOR
    assert resource.tags == ["kick", "basics"]


@pytest.mark.asyncio
async def test_create_non_link_resource_subtitle(resource_repo):
    resource = await ResourceService(resource_repo).create_resource(
        ResourceCreate(title="Poster", type="IMAGE", url="uploads/poster.png", author="Someone")
    )
    assert resource.type == "Image"
    assert resource.subtitle == "Community Post"
    assert resource.author == "Someone"


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [
    {"type": "Link", "url": "https://x"},
    {"title": "T", "url": "https://x"},
    {"title": "T", "type": "Link"},
    {"title": "T", "type": "Audio", "url": "https://x"},
])
async def test_create_resource_validation(resource_repo, data):
    with pytest.raises(ValidationError):
        await ResourceService(resource_repo).create_resource(ResourceCreate(**data))
    resource_repo.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_resources_all_means_no_type_filter(resource_repo):
    service = ResourceService(resource_repo)

    await service.list_resources(resource_type="All")
    resource_repo.list_filtered.assert_awaited_with(search=None, tag=None, resource_type=None)

    await service.list_resources(search=" kick ", resource_type="video")
    resource_repo.list_filtered.assert_awaited_with(search="kick", tag=None, resource_type="Video")


@pytest.mark.asyncio
async def test_delete_resource_not_found(resource_repo):
    resource_repo.get_by_id.return_value = None
    with pytest.raises(NotFoundError):
        await ResourceService(resource_repo).delete_resource(1)
