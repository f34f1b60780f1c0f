"""Comment database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime, Index, Integer, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from blogger.configs.settings import MAX_USER_LENGTH
from blogger.utils.helpers import utc_now


class CommentDB(SQLModel, table=True):
    """Comment database model; rows are removed together with their blog."""

    __tablename__ = cast("declared_attr[str]", "comments")

    __table_args__ = (Index("ix_comments_blog_created", "blog_id", "created_at"),)

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Comment ID",
    )

    comment: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment text",
    )
    user: str = Field(
        sa_column=Column(String(MAX_USER_LENGTH), nullable=False),
        description="Commenting user",
    )

    blog_id: int = Field(
        sa_column=Column(
            "blog_id",
            Integer,
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Blog ID (foreign key to blogs.id)",
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
