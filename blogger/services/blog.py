"""
Blog service.

Holds the blog rules that sit on top of plain persistence: duplicate-title
detection, the one-way draft to published transition, and paginated,
title-filtered listings.
"""

from logging import getLogger
from typing import Any

from blogger.configs import file_logger
from blogger.errors.database import DuplicateEntryError
from blogger.errors.resource import BadRequestError, ConflictError, NotFoundError
from blogger.models import BlogDB
from blogger.repositories import BlogRepository
from blogger.schemas.blog import BlogCreate
from blogger.services.validation import validate_payload
from blogger.utils.pagination import Page, RawValue, build_page_request, parse_id

logger = file_logger(getLogger(__name__))

INVALID_BLOG_ID = "Invalid Blog Id."
BLOG_NOT_FOUND = "Blog Entry Not Found."
BLOG_EXISTS = "This Blog Entry Already Exists."
ALREADY_PUBLISHED = "Blog Entry is Already Published."
BLOGS_PER_PAGE_TOO_LARGE = "Blogs Per Page Can't be greater than 50."
NO_BLOGS_FOUND = "No Blog Entries Found for This Query."


async def get_blog_or_404(repo: BlogRepository, blog_id: RawValue) -> BlogDB:
    """
    Load a blog from a raw path id.

    Args:
        repo: Blog repository
        blog_id: Raw id from the URL path

    Returns:
        BlogDB: The blog

    Raises:
        NotFoundError: If the id is not a positive integer or no blog has it
    """
    parsed = parse_id(blog_id)
    if parsed is None:
        raise NotFoundError(INVALID_BLOG_ID)

    blog = await repo.get_by_id(parsed)
    if blog is None:
        raise NotFoundError(BLOG_NOT_FOUND)
    return blog


class BlogService:
    """Service for creating, publishing, listing and deleting blogs."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository for database operations
        """
        self.blog_repo = blog_repo

    async def create(self, data: BlogCreate | dict[str, Any]) -> BlogDB:
        """
        Create a new draft blog.

        Args:
            data: Raw request body or validated ``BlogCreate``

        Returns:
            BlogDB: The created blog, unpublished

        Raises:
            ValidationError: If the body does not match the blog schema
            ConflictError: If an existing title contains this title or is
                contained in it, ignoring case
        """
        blog = validate_payload(BlogCreate, data)

        if await self.blog_repo.find_similar_title(blog.title) is not None:
            raise ConflictError(BLOG_EXISTS)

        try:
            created = await self.blog_repo.create(blog)
        except DuplicateEntryError as e:
            # Lost a race against a concurrent create with the same title.
            raise ConflictError(BLOG_EXISTS) from e

        logger.info(f"Created blog {created.id}")
        return created

    async def get(self, blog_id: RawValue) -> BlogDB:
        """Get a blog by id, draft or published."""
        return await get_blog_or_404(self.blog_repo, blog_id)

    async def publish(self, blog_id: RawValue) -> BlogDB:
        """
        Publish a draft blog.

        Raises:
            NotFoundError: If the blog does not exist
            BadRequestError: If the blog is already published
        """
        blog = await get_blog_or_404(self.blog_repo, blog_id)
        if blog.is_published or not await self.blog_repo.mark_published(blog):
            raise BadRequestError(ALREADY_PUBLISHED)

        logger.info(f"Published blog {blog.id}")
        return blog

    async def delete(self, blog_id: RawValue) -> None:
        """
        Delete a blog and every comment attached to it.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog = await get_blog_or_404(self.blog_repo, blog_id)
        await self.blog_repo.delete_with_comments(blog.id)

    async def list_all(
        self,
        page: RawValue = None,
        per_page: RawValue = None,
        title: str | None = None,
    ) -> Page[BlogDB]:
        """
        List drafts and published blogs ordered by title.

        Raises:
            BadRequestError: If ``per_page`` is greater than 50
            NotFoundError: If the requested page is empty
        """
        return await self._list(page, per_page, title, published_only=False)

    async def list_published(
        self,
        page: RawValue = None,
        per_page: RawValue = None,
        title: str | None = None,
    ) -> Page[BlogDB]:
        """
        List published blogs ordered by title.

        Raises:
            BadRequestError: If ``per_page`` is greater than 50
            NotFoundError: If the requested page is empty
        """
        return await self._list(page, per_page, title, published_only=True)

    async def _list(
        self,
        page: RawValue,
        per_page: RawValue,
        title: str | None,
        *,
        published_only: bool,
    ) -> Page[BlogDB]:
        request = build_page_request(
            page,
            per_page,
            too_large_message=BLOGS_PER_PAGE_TOO_LARGE,
            not_found_message=NO_BLOGS_FOUND,
        )

        blogs, total = await self.blog_repo.list_page(
            request.offset,
            request.limit,
            title,
            published_only=published_only,
        )
        if not blogs:
            raise NotFoundError(NO_BLOGS_FOUND)

        return Page(items=blogs, total_count=total, page=request.page, per_page=request.per_page)
