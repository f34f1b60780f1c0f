# blogger/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - Create blog (draft)
  - Get blog by id
  - Publish blog
  - Delete blog (and its comments)
  - List all blogs, drafts included
  - List published blogs

Pagination
----------
Listings accept `page` and `blogsPerPage` (default 50, max 50) plus an
optional case-insensitive `title` filter, and are ordered by title. An
empty page answers `404`.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blogger.dependencies import BlogListQueryDep, BlogServiceDep
from blogger.models import BlogDB
from blogger.schemas import BlogPageResponse, BlogResponse
from blogger.utils.pagination import Page

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])

BLOG_EXAMPLE = {
    "id": 1,
    "title": "Getting Started With Async Python",
    "post": "Coroutines are functions that can pause and resume...",
    "author": "Jane Doe",
    "tags": ["python", "asyncio"],
    "isPublished": False,
    "createdAt": "2025-01-01T10:00:00Z",
    "updatedAt": "2025-01-01T10:00:00Z",
}

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"message": "Blog Entry Not Found."}}},
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog, from_attributes=True)


def blog_page_to_response(page: Page[BlogDB]) -> BlogPageResponse:
    """Wrap a page of blogs in the listing envelope."""
    return BlogPageResponse(
        blogs=[db_blog_to_response(blog) for blog in page.items],
        total_count=page.total_count,
        selected_page=page.page,
        blogs_per_page=page.per_page,
        total_pages=page.total_pages,
    )


LIST_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {
        "content": {
            "application/json": {
                "example": {
                    "blogs": [BLOG_EXAMPLE],
                    "totalCount": 1,
                    "selectedPage": 1,
                    "blogsPerPage": 50,
                    "totalPages": 1,
                },
            },
        },
    },
    400: {
        "description": "Page size too large",
        "content": {
            "application/json": {
                "example": {"message": "Blogs Per Page Can't be greater than 50."},
            },
        },
    },
    404: {
        "description": "Empty page",
        "content": {
            "application/json": {
                "example": {"message": "No Blog Entries Found for This Query."},
            },
        },
    },
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a draft blog post. Titles overlapping an existing title are rejected.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Invalid blog data",
            "content": {"application/json": {"example": {"message": '"title" is required'}}},
        },
        409: {
            "description": "Duplicate title",
            "content": {
                "application/json": {"example": {"message": "This Blog Entry Already Exists."}},
            },
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        Any,
        Body(
            openapi_examples={
                "basic": {
                    "summary": "Basic blog creation",
                    "value": {
                        "title": "Getting Started With Async Python",
                        "post": "Coroutines are functions that can pause and resume...",
                        "author": "Jane Doe",
                        "tags": ["python", "asyncio"],
                    },
                },
            },
        ),
    ],
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new draft blog post.

    Parameters
    ----------
    blog : Any
        Raw JSON body, validated by the service.
    service : BlogService
        Service dependency.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    return db_blog_to_response(await service.create(blog))


@router.get(
    "/all",
    response_class=ORJSONResponse,
    response_model=BlogPageResponse,
    summary="List all blogs",
    description="Paginated list of drafts and published blogs, ordered by title.",
    responses=LIST_RESPONSES,
    operation_id="blogs_list_all",
)
async def list_all_blogs(service: BlogServiceDep, query: BlogListQueryDep) -> BlogPageResponse:
    """
    List drafts and published blogs.

    Parameters
    ----------
    service : BlogService
        Service dependency.
    query : BlogListQuery
        Raw pagination and title filter values.

    Returns
    -------
    BlogPageResponse
        Page envelope.
    """
    page = await service.list_all(query.page, query.blogs_per_page, query.title)
    return blog_page_to_response(page)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=BlogPageResponse,
    summary="List published blogs",
    description="Paginated list of published blogs, ordered by title.",
    responses=LIST_RESPONSES,
    operation_id="blogs_list_published",
)
async def list_published_blogs(
    service: BlogServiceDep,
    query: BlogListQueryDep,
) -> BlogPageResponse:
    """List published blogs only."""
    page = await service.list_published(query.page, query.blogs_per_page, query.title)
    return blog_page_to_response(page)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog post, draft or published, by its id.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    """
    Get a blog by id.

    Parameters
    ----------
    blog_id : str
        Raw blog id; anything but a positive integer answers `404`.
    service : BlogService
        Service dependency.

    Returns
    -------
    BlogResponse
        Blog data.
    """
    return db_blog_to_response(await service.get(blog_id))


@router.post(
    "/{blog_id}/publish",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Publish a blog",
    description="Publish a draft blog. Publishing is one-way.",
    responses={
        200: {"content": {"application/json": {"example": {**BLOG_EXAMPLE, "isPublished": True}}}},
        400: {
            "description": "Already published",
            "content": {
                "application/json": {"example": {"message": "Blog Entry is Already Published."}},
            },
        },
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_publish",
)
async def publish_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    """Publish a draft blog."""
    return db_blog_to_response(await service.publish(blog_id))


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a blog",
    description="Delete a blog together with all of its comments.",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: str, service: BlogServiceDep) -> Response:
    """
    Delete a blog and its comments.

    Parameters
    ----------
    blog_id : str
        Raw blog id.
    service : BlogService
        Service dependency.

    Returns
    -------
    Response
        Empty `204` response.
    """
    await service.delete(blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
