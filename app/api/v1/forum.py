from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_current_user, get_post_repository
from app.models.user import User
from app.repositories.post_repository import PostRepository
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.forum import PostCreate, CommentCreate, PostRead, LikeRead, CommentRead
from app.services.forum_service import ForumService

router = APIRouter(prefix="/forum", tags=["forum"])


def get_forum_service(repo: PostRepository = Depends(get_post_repository)) -> ForumService:
    return ForumService(repo)


@router.post("", response_model=ApiResponse[PostRead], status_code=status.HTTP_201_CREATED)
async def create_post(
        payload: PostCreate,
        current_user: User = Depends(get_current_user),
        service: ForumService = Depends(get_forum_service)
):
    post = await service.create_post(current_user, payload)
    return ApiResponse(msg="Post created successfully", data=PostRead.model_validate(post))


@router.get("", response_model=ApiResponse[List[PostRead]])
async def get_feed(
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
        service: ForumService = Depends(get_forum_service)
):
    """Лента постов, новые сверху"""
    posts = await service.get_feed(page=page, limit=limit)
    return ApiResponse(data=[PostRead.model_validate(p) for p in posts])


@router.get("/tags", response_model=ApiResponse[List[str]])
async def get_tags(service: ForumService = Depends(get_forum_service)):
    return ApiResponse(data=await service.get_tags())


@router.get("/search", response_model=ApiResponse[List[PostRead]])
async def search_posts(
        q: Optional[str] = None,
        tag: Optional[str] = None,
        service: ForumService = Depends(get_forum_service)
):
    """Поиск по тексту, имени автора и тегам; тег ищется с "#" и без"""
    posts = await service.search(q=q, tag=tag)
    return ApiResponse(data=[PostRead.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=ApiResponse[PostRead])
async def get_post(post_id: int, service: ForumService = Depends(get_forum_service)):
    post = await service.get_post(post_id)
    return ApiResponse(data=PostRead.model_validate(post))


@router.put("/like/{post_id}", response_model=ApiResponse[List[LikeRead]])
async def toggle_like(
        post_id: int,
        current_user: User = Depends(get_current_user),
        service: ForumService = Depends(get_forum_service)
):
    likes = await service.toggle_like(post_id, current_user)
    return ApiResponse(data=[LikeRead.model_validate(like) for like in likes])


@router.post("/comment/{post_id}", response_model=ApiResponse[List[CommentRead]])
async def add_comment(
        post_id: int,
        payload: CommentCreate,
        current_user: User = Depends(get_current_user),
        service: ForumService = Depends(get_forum_service)
):
    comments = await service.add_comment(post_id, current_user, payload.text)
    return ApiResponse(data=[CommentRead.model_validate(c) for c in comments])


@router.delete("/comment/{post_id}/{comment_id}", response_model=ApiResponse[List[CommentRead]])
async def delete_comment(
        post_id: int,
        comment_id: int,
        current_user: User = Depends(get_current_user),
        service: ForumService = Depends(get_forum_service)
):
    comments = await service.delete_comment(post_id, comment_id, current_user)
    return ApiResponse(data=[CommentRead.model_validate(c) for c in comments])


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
        post_id: int,
        current_user: User = Depends(get_current_user),
        service: ForumService = Depends(get_forum_service)
):
    await service.delete_post(post_id, current_user)
    return MessageResponse(msg="Post removed")
