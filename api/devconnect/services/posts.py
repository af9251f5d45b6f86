"""Posts written by users."""

from uuid import UUID

from fastapi import status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.errors import NotFound, Unauthorized
from devconnect.models.post import Post
from devconnect.models.user import User


class PostService:
    """Service for creating, listing and removing posts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_post(self, user_id: UUID, text: str) -> Post:
        """Create a post, copying the author's name and avatar onto it."""
        user = await self.db.get(User, user_id)
        if not user:
            raise Unauthorized("User not found")

        post = Post(user_id=user.id, text=text, name=user.name, avatar=user.avatar)
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        return post

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        result = await self.db.execute(select(Post).order_by(Post.created_at.desc()))
        return list(result.scalars().all())

    async def get_post(self, post_id: str) -> Post:
        """
        Get a post by id.

        Raises:
            NotFound: 404 if the post does not exist or the id is malformed
        """
        try:
            post_uuid = UUID(post_id)
        except ValueError:
            raise NotFound("Post not found", status_code=status.HTTP_404_NOT_FOUND)

        post = await self.db.get(Post, post_uuid)
        if not post:
            raise NotFound("Post not found", status_code=status.HTTP_404_NOT_FOUND)
        return post

    async def delete_post(self, user_id: UUID, post_id: str) -> None:
        """
        Delete one of the caller's posts.

        Raises:
            NotFound: 404 if the post does not exist
            Unauthorized: the post belongs to someone else
        """
        post = await self.get_post(post_id)
        if post.user_id != user_id:
            raise Unauthorized("User not authorized")

        await self.db.delete(post)
        await self.db.commit()
