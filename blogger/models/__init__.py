"""Database models for the application."""

from blogger.models.blog import BlogDB
from blogger.models.comment import CommentDB

__all__ = ["BlogDB", "CommentDB"]
