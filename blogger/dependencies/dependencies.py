# blogger/dependencies/dependencies.py

"""Request dependencies: sessions, repositories, services and list queries."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.db import get_session
from blogger.repositories import BlogRepository, CommentRepository
from blogger.services import BlogService, CommentService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    """Resolve the `CommentRepository` dependency."""
    return CommentRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


def get_blog_service(blog_repo: BlogRepoDep) -> BlogService:
    """Build a `BlogService` bound to the request's repository."""
    return BlogService(blog_repo)


def get_comment_service(blog_repo: BlogRepoDep, comment_repo: CommentRepoDep) -> CommentService:
    """Build a `CommentService`; both repositories share the request session."""
    return CommentService(blog_repo, comment_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]


@dataclass(frozen=True)
class BlogListQuery:
    """
    Query container for blog listings.

    Values are kept raw; the service applies defaults for anything that is
    missing or not a number.

    Parameters
    ----------
    page : str | None
        Requested page (1-indexed).
    blogs_per_page : str | None
        Requested page size.
    title : str | None
        Optional case-insensitive title filter.
    """

    page: str | None = None
    blogs_per_page: str | None = None
    title: str | None = None


def get_blog_list_query(
    page: Annotated[str | None, Query(description="Page number, defaults to 1")] = None,
    blogs_per_page: Annotated[
        str | None,
        Query(alias="blogsPerPage", description="Blogs per page, defaults to 50, max 50"),
    ] = None,
    title: Annotated[
        str | None,
        Query(description="Case-insensitive title search"),
    ] = None,
) -> BlogListQuery:
    """
    Dependency to construct `BlogListQuery` from query parameters.

    Returns
    -------
    BlogListQuery
        Aggregated query parameters object.
    """
    return BlogListQuery(page=page, blogs_per_page=blogs_per_page, title=title)


@dataclass(frozen=True)
class CommentListQuery:
    """Query container for comment listings."""

    page: str | None = None
    comments_per_page: str | None = None


def get_comment_list_query(
    page: Annotated[str | None, Query(description="Page number, defaults to 1")] = None,
    comments_per_page: Annotated[
        str | None,
        Query(alias="commentsPerPage", description="Comments per page, defaults to 50, max 50"),
    ] = None,
) -> CommentListQuery:
    """Dependency to construct `CommentListQuery` from query parameters."""
    return CommentListQuery(page=page, comments_per_page=comments_per_page)


BlogListQueryDep = Annotated[BlogListQuery, Depends(get_blog_list_query)]
CommentListQueryDep = Annotated[CommentListQuery, Depends(get_comment_list_query)]
