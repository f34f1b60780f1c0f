# blogger/dependencies/__init__.py

from blogger.dependencies.dependencies import (
    BlogListQuery,
    BlogListQueryDep,
    BlogRepoDep,
    BlogServiceDep,
    CommentListQuery,
    CommentListQueryDep,
    CommentRepoDep,
    CommentServiceDep,
    SessionDep,
    get_blog_list_query,
    get_blog_repository,
    get_blog_service,
    get_comment_list_query,
    get_comment_repository,
    get_comment_service,
)

__all__ = [
    "BlogListQuery",
    "BlogListQueryDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CommentListQuery",
    "CommentListQueryDep",
    "CommentRepoDep",
    "CommentServiceDep",
    "SessionDep",
    "get_blog_list_query",
    "get_blog_repository",
    "get_blog_service",
    "get_comment_list_query",
    "get_comment_repository",
    "get_comment_service",
]
