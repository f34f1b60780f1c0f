# blogger/routes/comment.py

"""
Comment Routes.

Summary
-------
Endpoints include:
  - Add a comment to a published blog
  - Get one comment of a blog
  - List a blog's comments, newest first

Listings accept `page` and `commentsPerPage` (default 50, max 50).
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blogger.dependencies import CommentListQueryDep, CommentServiceDep
from blogger.models import CommentDB
from blogger.schemas import CommentPageResponse, CommentResponse
from blogger.utils.pagination import Page

router = APIRouter(prefix="/blogs/{blog_id}/comments", tags=["💬 Comments"])

COMMENT_EXAMPLE = {
    "id": 1,
    "comment": "Great write-up, thanks!",
    "user": "john",
    "blogId": 1,
    "createdAt": "2025-01-01T10:00:00Z",
    "updatedAt": "2025-01-01T10:00:00Z",
}


def db_comment_to_response(db_comment: CommentDB) -> CommentResponse:
    """Convert a `CommentDB` instance to `CommentResponse`."""
    return CommentResponse.model_validate(db_comment, from_attributes=True)


def comment_page_to_response(page: Page[CommentDB]) -> CommentPageResponse:
    """Wrap a page of comments in the listing envelope."""
    return CommentPageResponse(
        comments=[db_comment_to_response(comment) for comment in page.items],
        total_count=page.total_count,
        selected_page=page.page,
        comments_per_page=page.per_page,
        total_pages=page.total_pages,
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    status_code=HTTP_201_CREATED,
    summary="Add a comment",
    description="Add a comment to a published blog.",
    responses={
        201: {"content": {"application/json": {"example": COMMENT_EXAMPLE}}},
        400: {
            "description": "Invalid comment data or blog not published",
            "content": {
                "application/json": {
                    "example": {"message": "This Blog Post is Not Published yet."},
                },
            },
        },
        404: {
            "description": "Blog not found",
            "content": {"application/json": {"example": {"message": "Blog Entry Not Found."}}},
        },
    },
    operation_id="comments_create",
)
async def create_comment(
    blog_id: str,
    comment: Annotated[
        Any,
        Body(
            openapi_examples={
                "basic": {
                    "summary": "Basic comment",
                    "value": {"comment": "Great write-up, thanks!", "user": "john"},
                },
            },
        ),
    ],
    service: CommentServiceDep,
) -> CommentResponse:
    """
    Add a comment to a published blog.

    Parameters
    ----------
    blog_id : str
        Raw parent blog id.
    comment : Any
        Raw JSON body, validated by the service after the blog checks.
    service : CommentService
        Service dependency.

    Returns
    -------
    CommentResponse
        Created comment.
    """
    return db_comment_to_response(await service.create(blog_id, comment))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=CommentPageResponse,
    summary="List a blog's comments",
    description="Paginated list of a blog's comments, newest first.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "comments": [COMMENT_EXAMPLE],
                        "totalCount": 1,
                        "selectedPage": 1,
                        "commentsPerPage": 50,
                        "totalPages": 1,
                    },
                },
            },
        },
        400: {
            "description": "Page size too large",
            "content": {
                "application/json": {
                    "example": {"message": "Comments Per Page Can't be greater than 50."},
                },
            },
        },
        404: {
            "description": "Blog not found or empty page",
            "content": {
                "application/json": {"example": {"message": "No Comments Found for This Query."}},
            },
        },
    },
    operation_id="comments_list",
)
async def list_comments(
    blog_id: str,
    service: CommentServiceDep,
    query: CommentListQueryDep,
) -> CommentPageResponse:
    """List a blog's comments, newest first."""
    page = await service.list_by_blog(blog_id, query.page, query.comments_per_page)
    return comment_page_to_response(page)


@router.get(
    "/{comment_id}",
    response_class=ORJSONResponse,
    response_model=CommentResponse,
    summary="Get a comment",
    description="Retrieve one comment of a blog.",
    responses={
        200: {"content": {"application/json": {"example": COMMENT_EXAMPLE}}},
        404: {
            "description": "Blog or comment not found",
            "content": {"application/json": {"example": {"message": "Comment Not Found."}}},
        },
    },
    operation_id="comments_get",
)
async def get_comment(blog_id: str, comment_id: str, service: CommentServiceDep) -> CommentResponse:
    """
    Get one comment, scoped to its blog.

    Parameters
    ----------
    blog_id : str
        Raw parent blog id.
    comment_id : str
        Raw comment id.
    service : CommentService
        Service dependency.

    Returns
    -------
    CommentResponse
        Comment data.
    """
    return db_comment_to_response(await service.get(blog_id, comment_id))
