from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_resource_repository
from app.repositories.resource_repository import ResourceRepository
from app.schemas.common import ApiResponse, ListResponse, MessageResponse
from app.schemas.resource import ResourceCreate, ResourceRead
from app.services.resource_service import ResourceService

router = APIRouter(prefix="/resources", tags=["resources"])


def get_resource_service(repo: ResourceRepository = Depends(get_resource_repository)) -> ResourceService:
    return ResourceService(repo)


@router.post("", response_model=ApiResponse[ResourceRead], status_code=status.HTTP_201_CREATED)
async def create_resource(payload: ResourceCreate, service: ResourceService = Depends(get_resource_service)):
    resource = await service.create_resource(payload)
    return ApiResponse(msg="Resource added successfully", data=ResourceRead.model_validate(resource))


@router.get("", response_model=ListResponse[ResourceRead])
async def list_resources(
        search: Optional[str] = None,
        tag: Optional[str] = None,
        resource_type: Optional[str] = Query(None, alias="type"),
        service: ResourceService = Depends(get_resource_service)
):
    """Библиотека ресурсов, новые сверху; type=All - без фильтра"""
    resources = await service.list_resources(search=search, tag=tag, resource_type=resource_type)
    return ListResponse(count=len(resources), data=[ResourceRead.model_validate(r) for r in resources])


@router.get("/tags", response_model=ApiResponse[List[str]])
async def get_tags(service: ResourceService = Depends(get_resource_service)):
    return ApiResponse(data=await service.get_tags())


@router.delete("/{resource_id}", response_model=MessageResponse)
async def delete_resource(resource_id: int, service: ResourceService = Depends(get_resource_service)):
    await service.delete_resource(resource_id)
    return MessageResponse(msg="Resource deleted successfully")
