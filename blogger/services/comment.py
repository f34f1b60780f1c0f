"""
Comment service.

Comments can only be attached to published blogs and are always looked up
through their parent blog.
"""

from logging import getLogger
from typing import Any

from blogger.configs import file_logger
from blogger.errors.resource import BadRequestError, NotFoundError
from blogger.models import CommentDB
from blogger.repositories import BlogRepository, CommentRepository
from blogger.schemas.comment import CommentCreate
from blogger.services.blog import get_blog_or_404
from blogger.services.validation import validate_payload
from blogger.utils.pagination import Page, RawValue, build_page_request, parse_id

logger = file_logger(getLogger(__name__))

BLOG_NOT_PUBLISHED = "This Blog Post is Not Published yet."
COMMENT_NOT_FOUND = "Comment Not Found."
COMMENTS_PER_PAGE_TOO_LARGE = "Comments Per Page Can't be greater than 50."
NO_COMMENTS_FOUND = "No Comments Found for This Query."


class CommentService:
    """Service for creating, fetching and listing a blog's comments."""

    def __init__(self, blog_repo: BlogRepository, comment_repo: CommentRepository) -> None:
        """
        Initialize the comment service.

        Args:
            blog_repo: Blog repository, used to resolve the parent blog
            comment_repo: Comment repository for database operations
        """
        self.blog_repo = blog_repo
        self.comment_repo = comment_repo

    async def create(self, blog_id: RawValue, data: CommentCreate | dict[str, Any]) -> CommentDB:
        """
        Add a comment to a published blog.

        The parent blog is checked before the body, so a bad body on a
        missing or draft blog reports the blog problem.

        Args:
            blog_id: Raw parent blog id from the URL path
            data: Raw request body or validated ``CommentCreate``

        Returns:
            CommentDB: The created comment

        Raises:
            NotFoundError: If the blog id is invalid or the blog does not exist
            BadRequestError: If the blog is still a draft
            ValidationError: If the body does not match the comment schema
        """
        blog = await get_blog_or_404(self.blog_repo, blog_id)
        if not blog.is_published:
            raise BadRequestError(BLOG_NOT_PUBLISHED)

        comment = validate_payload(CommentCreate, data)
        created = await self.comment_repo.create(blog.id, comment)

        logger.info(f"Created comment {created.id} on blog {blog.id}")
        return created

    async def get(self, blog_id: RawValue, comment_id: RawValue) -> CommentDB:
        """
        Get one comment of a blog.

        Raises:
            NotFoundError: If the blog or the comment is missing, or the
                comment belongs to another blog
        """
        blog = await get_blog_or_404(self.blog_repo, blog_id)

        parsed = parse_id(comment_id)
        if parsed is None:
            raise NotFoundError(COMMENT_NOT_FOUND)

        comment = await self.comment_repo.get_for_blog(blog.id, parsed)
        if comment is None:
            raise NotFoundError(COMMENT_NOT_FOUND)
        return comment

    async def list_by_blog(
        self,
        blog_id: RawValue,
        page: RawValue = None,
        per_page: RawValue = None,
    ) -> Page[CommentDB]:
        """
        List a blog's comments, newest first.

        Raises:
            NotFoundError: If the blog is missing or the requested page is empty
            BadRequestError: If ``per_page`` is greater than 50
        """
        blog = await get_blog_or_404(self.blog_repo, blog_id)
        request = build_page_request(
            page,
            per_page,
            too_large_message=COMMENTS_PER_PAGE_TOO_LARGE,
            not_found_message=NO_COMMENTS_FOUND,
        )

        comments, total = await self.comment_repo.list_for_blog(
            blog.id,
            request.offset,
            request.limit,
        )
        if not comments:
            raise NotFoundError(NO_COMMENTS_FOUND)

        return Page(
            items=comments,
            total_count=total,
            page=request.page,
            per_page=request.per_page,
        )
