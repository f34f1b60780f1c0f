"""
Blog schemas.

Request bodies are validated strictly: unknown keys are rejected and
strings are never coerced from other JSON types. Responses use the
camelCase field names clients already depend on.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogger.configs.settings import (
    MAX_AUTHOR_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_AUTHOR_LENGTH,
    MIN_TITLE_LENGTH,
)


class BlogCreate(BaseModel):
    """Blog creation model (request body, excludes generated fields)."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(
        ...,
        min_length=MIN_TITLE_LENGTH,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["Getting Started With Async Python"],
    )
    post: str = Field(
        default="",
        description="Blog post body, may be empty",
        examples=["Coroutines are functions that can pause and resume..."],
    )
    author: str = Field(
        ...,
        min_length=MIN_AUTHOR_LENGTH,
        max_length=MAX_AUTHOR_LENGTH,
        description="Blog author",
        examples=["Jane Doe"],
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Blog tags",
        examples=[["python", "asyncio"]],
    )


class BlogResponse(BaseModel):
    """Blog as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    post: str
    author: str
    tags: list[str]
    is_published: bool = Field(alias="isPublished")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class BlogPageResponse(BaseModel):
    """Page envelope for blog listings."""

    model_config = ConfigDict(populate_by_name=True)

    blogs: list[BlogResponse]
    total_count: int = Field(alias="totalCount")
    selected_page: int = Field(alias="selectedPage")
    blogs_per_page: int = Field(alias="blogsPerPage")
    total_pages: int = Field(alias="totalPages")
