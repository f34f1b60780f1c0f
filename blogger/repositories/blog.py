"""Blog repository for database operations."""

from logging import getLogger

from sqlalchemy import ColumnElement, String, delete, func, literal, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from blogger.configs import file_logger
from blogger.errors.database import TransactionError
from blogger.models import BlogDB, CommentDB
from blogger.repositories.base import BaseRepository
from blogger.schemas.blog import BlogCreate
from blogger.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))


def title_filter(title: str) -> ColumnElement[bool]:
    """Case-insensitive literal substring match on the blog title."""
    # pyrefly: ignore [missing-attribute]
    return BlogDB.title.icontains(title, autoescape=True)


def escaped_lower_title() -> ColumnElement[str]:
    """Lower-cased stored title with LIKE wildcards escaped by a backslash."""
    escaped = func.lower(BlogDB.title)
    for char in ("\\", "%", "_"):
        escaped = func.replace(escaped, char, f"\\{char}", type_=String)
    return escaped


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities,
    providing the narrow set of queries the blog and comment services need.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate) -> BlogDB:
        """
        Create a new draft blog in the database.

        Args:
            blog: Validated blog creation data

        Returns:
            BlogDB: Created blog database model

        Raises:
            DuplicateEntryError: If the title collides with the unique title index
            DatabaseError: For other database errors
        """
        now = utc_now()
        db_blog = BlogDB(
            title=blog.title,
            post=blog.post,
            author=blog.author,
            tags=list(blog.tags),
            is_published=False,
            created_at=now,
            updated_at=now,
        )
        return await self._add_and_refresh(db_blog)

    async def find_similar_title(self, title: str) -> int | None:
        """
        Find a blog whose title overlaps ``title``, ignoring case.

        A title overlaps when it contains ``title`` or is contained in it.

        Args:
            title: Candidate title

        Returns:
            int | None: ID of the first overlapping blog, None if there is none
        """
        candidate = func.lower(literal(title, String))
        statement = (
            select(BlogDB.id)
            .where(
                or_(
                    title_filter(title),
                    # pyrefly: ignore [bad-argument-type]
                    candidate.contains(escaped_lower_title(), escape="\\"),
                ),
            )
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        offset: int,
        limit: int,
        title: str | None = None,
        *,
        published_only: bool = False,
    ) -> tuple[list[BlogDB], int]:
        """
        Get blogs ordered by title with an optional title filter.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return
            title: Optional case-insensitive substring filter
            published_only: Restrict to published blogs

        Returns:
            tuple[list[BlogDB], int]: The page and the total number of matches
        """
        conditions: list[ColumnElement[bool]] = []
        if published_only:
            # pyrefly: ignore [bad-argument-type]
            conditions.append(BlogDB.is_published.is_(True))
        if title:
            conditions.append(title_filter(title))

        return await self.find_page(
            conditions,
            # pyrefly: ignore [missing-attribute]
            order_by=[BlogDB.title.asc(), BlogDB.id.asc()],
            offset=offset,
            limit=limit,
        )

    async def mark_published(self, blog: BlogDB) -> bool:
        """
        Flip a draft blog to published.

        The update only matches drafts, so two concurrent publishes of the
        same blog cannot both succeed.

        Args:
            blog: Blog to publish

        Returns:
            bool: True if the blog was a draft and is now published
        """
        statement = (
            update(BlogDB)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog.id, BlogDB.is_published.is_(False))
            .values(is_published=True, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        if result.rowcount == 0:
            return False

        await self.session.flush()
        await self.session.refresh(blog)
        return True

    async def delete_with_comments(self, blog_id: int) -> int:
        """
        Delete a blog together with all of its comments.

        Both statements run in the session's current transaction, so either
        both land on commit or neither does.

        Args:
            blog_id: Blog ID

        Returns:
            int: Number of comments removed

        Raises:
            TransactionError: If either delete fails
        """
        try:
            comments = await self.session.execute(
                # pyrefly: ignore [bad-argument-type]
                delete(CommentDB).where(CommentDB.blog_id == blog_id),
            )
            await self.session.execute(
                # pyrefly: ignore [bad-argument-type]
                delete(BlogDB).where(BlogDB.id == blog_id),
            )
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Cascade delete failed for blog {blog_id}")
            raise TransactionError(detail=f"Failed to delete blog {blog_id}") from e

        removed = comments.rowcount or 0
        logger.info(f"Deleted blog {blog_id} and {removed} comment(s)")
        return removed
