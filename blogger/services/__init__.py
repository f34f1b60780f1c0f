from blogger.services.blog import BlogService, get_blog_or_404
from blogger.services.comment import CommentService
from blogger.services.validation import validate_payload

__all__ = ["BlogService", "CommentService", "get_blog_or_404", "validate_payload"]
