"""Blog database model using SQLModel."""

from datetime import datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import JSON, Boolean, DateTime, Index, Text, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blogger.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH
from blogger.utils.helpers import utc_now


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Titles are unique ignoring case; the functional index backs the
    duplicate-title rule so that two concurrent creates cannot both land.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        Index("uq_blogs_title_lower", text("lower(title)"), unique=True),
        Index("ix_blogs_published_title", "is_published", "title"),
    )

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Blog ID",
    )

    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    post: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, server_default=""),
        description="Blog post body",
    )
    author: str = Field(
        sa_column=Column(String(MAX_AUTHOR_LENGTH), nullable=False),
        description="Blog author",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False),
        description="Blog tags",
    )
    is_published: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False, index=True),
        description="Whether the blog is publicly listed and open for comments",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Getting Started With Async Python",
                "post": "Coroutines are functions that can pause...",
                "author": "Jane Doe",
                "tags": ["python", "asyncio"],
                "is_published": False,
            },
        },
    )
