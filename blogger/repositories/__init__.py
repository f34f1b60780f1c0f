"""Repository layer for database operations."""

from blogger.repositories.blog import BlogRepository
from blogger.repositories.comment import CommentRepository

__all__ = ["BlogRepository", "CommentRepository"]
