from blogger.routes.blog import router as blog_router
from blogger.routes.comment import router as comment_router
from blogger.routes.health import create_health_router

__all__ = ["blog_router", "comment_router", "create_health_router"]
