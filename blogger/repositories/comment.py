"""Comment repository for database operations."""

from sqlalchemy import select

from blogger.models import CommentDB
from blogger.repositories.base import BaseRepository
from blogger.schemas.comment import CommentCreate
from blogger.utils.helpers import utc_now


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB

    async def create(self, blog_id: int, comment: CommentCreate) -> CommentDB:
        """
        Create a comment under a blog.

        Args:
            blog_id: Parent blog ID
            comment: Validated comment data

        Returns:
            CommentDB: Created comment
        """
        now = utc_now()
        db_comment = CommentDB(
            comment=comment.comment,
            user=comment.user,
            blog_id=blog_id,
            created_at=now,
            updated_at=now,
        )
        return await self._add_and_refresh(db_comment)

    async def get_for_blog(self, blog_id: int, comment_id: int) -> CommentDB | None:
        """
        Get a comment by ID, only if it belongs to ``blog_id``.

        Args:
            blog_id: Parent blog ID
            comment_id: Comment ID

        Returns:
            CommentDB | None: Comment if found under that blog, None otherwise
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(CommentDB).where(CommentDB.blog_id == blog_id, CommentDB.id == comment_id),
        )
        return result.scalar_one_or_none()

    async def list_for_blog(
        self,
        blog_id: int,
        offset: int,
        limit: int,
    ) -> tuple[list[CommentDB], int]:
        """
        Get a blog's comments, newest first.

        Args:
            blog_id: Parent blog ID
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            tuple[list[CommentDB], int]: The page and the blog's total comment count
        """
        return await self.find_page(
            # pyrefly: ignore [bad-argument-type]
            [CommentDB.blog_id == blog_id],
            # pyrefly: ignore [missing-attribute]
            order_by=[CommentDB.created_at.desc(), CommentDB.id.desc()],
            offset=offset,
            limit=limit,
        )

