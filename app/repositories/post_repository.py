from typing import List, Optional

from sqlalchemy import select, func, or_

from app.models.post import Post
from app.models.user import User
from app.repositories.base import BaseRepository
from app.repositories.search import like_pattern


class PostRepository(BaseRepository):
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        result = await self.db.execute(
            select(Post)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_feed(self, page: int = 1, limit: int = 10) -> List[Post]:
        offset = (page - 1) * limit
        result = await self.db.execute(
            select(Post)
            .order_by(Post.date.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def search(self, q: Optional[str] = None, tag: Optional[str] = None) -> List[Post]:
        query = select(Post)

        if tag:
            # "Taekwondo" и "#Taekwondo" считаются одним тегом
            clean_tag = tag.replace("#", "")
            query = query.where(Post.tags.overlap([clean_tag, f"#{clean_tag}"]))

        if q:
            pattern = like_pattern(q)
            query = query.where(or_(
                Post.text.ilike(pattern, escape="\\"),
                func.array_to_string(Post.tags, " ").ilike(pattern, escape="\\"),
                Post.author.has(User.name.ilike(pattern, escape="\\")),
            ))

        result = await self.db.execute(query.order_by(Post.date.desc(), Post.id.desc()))
        return list(result.scalars().all())

    async def distinct_tags(self) -> List[str]:
        result = await self.db.execute(select(func.unnest(Post.tags)).distinct())
        return list(result.scalars().all())

    async def create(self, post: Post) -> Post:
        self.db.add(post)
        await self.commit()
        return await self.get_by_id(post.id)

    async def save(self, post: Post) -> Post:
        """Сохранить изменения и перечитать пост вместе с лайками и комментариями."""
        await self.commit()
        return await self.get_by_id(post.id)

    async def delete(self, post: Post) -> None:
        await self.db.delete(post)
        await self.commit()
