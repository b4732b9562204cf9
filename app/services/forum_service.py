import logging
from typing import List, Optional

from app.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from app.models.post import Post, PostLike, PostComment
from app.models.user import User
from app.repositories.post_repository import PostRepository
from app.schemas.forum import PostCreate

logger = logging.getLogger(__name__)


class ForumService:
    """Посты форума: лента, поиск, лайки и комментарии"""

    def __init__(self, repo: PostRepository):
        self.repo = repo

    async def create_post(self, user: User, payload: PostCreate) -> Post:
        text = (payload.text or "").strip()
        if not text:
            raise ValidationError("Text is required")

        post = Post(
            user_id=user.id,
            text=text,
            image=payload.image or "",
            images=list(payload.images or []),
            tags=list(payload.tags or []),
            video_url=payload.video_url or "",
            video_thumbnail=payload.video_thumbnail or "",
        )
        post = await self.repo.create(post)
        logger.info(f"Пост {post.id} создан пользователем {user.id}")
        return post

    async def get_feed(self, page: int = 1, limit: int = 10) -> List[Post]:
        return await self.repo.list_feed(page=max(page, 1), limit=max(limit, 1))

    async def get_post(self, post_id: int) -> Post:
        post = await self.repo.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        return post

    async def get_tags(self) -> List[str]:
        tags = await self.repo.distinct_tags()
        return sorted({tag for tag in tags if tag and tag.strip()})

    async def search(self, q: Optional[str] = None, tag: Optional[str] = None) -> List[Post]:
        q = (q or "").strip()
        tag = (tag or "").strip()
        if not q and not tag:
            raise ValidationError("Search query or tag is required")
        return await self.repo.search(q=q or None, tag=tag or None)

    async def toggle_like(self, post_id: int, user: User) -> List[PostLike]:
        post = await self.get_post(post_id)

        existing = next((like for like in post.likes if like.user_id == user.id), None)
        if existing is not None:
            post.likes.remove(existing)
        else:
            post.likes.append(PostLike(user_id=user.id))

        post = await self.repo.save(post)
        return post.likes

    async def add_comment(self, post_id: int, user: User, text: Optional[str]) -> List[PostComment]:
        text = (text or "").strip()
        if not text:
            raise ValidationError("Text is required")

        post = await self.get_post(post_id)
        # Новые комментарии идут первыми
        post.comments.insert(0, PostComment(
            user_id=user.id,
            text=text,
            name=user.name,
            avatar=user.avatar,
        ))
        post = await self.repo.save(post)
        return post.comments

    async def delete_comment(self, post_id: int, comment_id: int, user: User) -> List[PostComment]:
        post = await self.get_post(post_id)

        comment = next((c for c in post.comments if c.id == comment_id), None)
        if comment is None:
            raise NotFoundError("Comment does not exist")
        if comment.user_id != user.id:
            raise AuthenticationError("User not authorized")

        post.comments.remove(comment)
        post = await self.repo.save(post)
        return post.comments

    async def delete_post(self, post_id: int, user: User) -> None:
        post = await self.get_post(post_id)
        if post.user_id != user.id:
            raise AuthenticationError("User not authorized")

        await self.repo.delete(post)
        logger.info(f"Пост {post_id} удален")
