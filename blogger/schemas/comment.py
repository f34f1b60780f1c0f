"""Comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from blogger.configs.settings import MAX_USER_LENGTH, MIN_COMMENT_LENGTH, MIN_USER_LENGTH


class CommentCreate(BaseModel):
    """Comment creation model (request body)."""

    model_config = ConfigDict(extra="forbid")

    comment: str = Field(
        ...,
        min_length=MIN_COMMENT_LENGTH,
        description="Comment text",
        examples=["Great write-up, thanks!"],
    )
    user: str = Field(
        ...,
        min_length=MIN_USER_LENGTH,
        max_length=MAX_USER_LENGTH,
        description="Commenting user",
        examples=["john"],
    )


class CommentResponse(BaseModel):
    """Comment as returned to clients."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    comment: str
    user: str
    blog_id: int = Field(alias="blogId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class CommentPageResponse(BaseModel):
    """Page envelope for comment listings."""

    model_config = ConfigDict(populate_by_name=True)

    comments: list[CommentResponse]
    total_count: int = Field(alias="totalCount")
    selected_page: int = Field(alias="selectedPage")
    comments_per_page: int = Field(alias="commentsPerPage")
    total_pages: int = Field(alias="totalPages")
