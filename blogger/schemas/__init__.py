from blogger.schemas.blog import BlogCreate, BlogPageResponse, BlogResponse
from blogger.schemas.comment import CommentCreate, CommentPageResponse, CommentResponse
from blogger.schemas.health import HealthCheckResponse

__all__ = [
    "BlogCreate",
    "BlogPageResponse",
    "BlogResponse",
    "CommentCreate",
    "CommentPageResponse",
    "CommentResponse",
    "HealthCheckResponse",
]
