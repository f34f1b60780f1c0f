# tests/services/test_comment_service.py
"""Tests for blogger/services/comment.py module."""

import pytest

from blogger.errors import BadRequestError, NotFoundError, ValidationError
from blogger.services import CommentService


class TestCreate:
    """Tests for CommentService.create."""

    async def test_comment_on_published_blog(
        self,
        comment_service: CommentService,
        make_blog,
    ) -> None:
        blog = await make_blog("Open For Comments", is_published=True)

        comment = await comment_service.create(str(blog.id), {"comment": "abc", "user": "john"})

        assert comment.id is not None
        assert comment.blog_id == blog.id
        assert comment.comment == "abc"
        assert comment.user == "john"

    async def test_comment_too_short(self, comment_service: CommentService, make_blog) -> None:
        blog = await make_blog("Open For Comments", is_published=True)

        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create(str(blog.id), {"comment": "ab", "user": "john"})
        assert exc_info.value.detail == '"comment" String should have at least 3 characters'

    async def test_draft_blog_rejects_comments(
        self,
        comment_service: CommentService,
        make_blog,
    ) -> None:
        blog = await make_blog("Still A Draft")

        with pytest.raises(BadRequestError) as exc_info:
            await comment_service.create(str(blog.id), {"comment": "Hello", "user": "john"})
        assert exc_info.value.detail == "This Blog Post is Not Published yet."

    async def test_blog_checked_before_body(
        self,
        comment_service: CommentService,
        make_blog,
    ) -> None:
        draft = await make_blog("Still A Draft")

        with pytest.raises(NotFoundError):
            await comment_service.create("99999999", {"bogus": True})
        with pytest.raises(BadRequestError):
            await comment_service.create(str(draft.id), {"bogus": True})

    async def test_invalid_blog_id(self, comment_service: CommentService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create("abc", {"comment": "Hello", "user": "john"})
        assert exc_info.value.detail == "Invalid Blog Id."


class TestGet:
    """Tests for CommentService.get."""

    async def test_get_scoped_to_blog(
        self,
        comment_service: CommentService,
        make_blog,
        make_comment,
    ) -> None:
        blog = await make_blog("First Blog", is_published=True)
        other = await make_blog("Second Blog", is_published=True)
        comment = await make_comment(blog)

        found = await comment_service.get(str(blog.id), str(comment.id))
        assert found.id == comment.id

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.get(str(other.id), str(comment.id))
        assert exc_info.value.detail == "Comment Not Found."

    @pytest.mark.parametrize("comment_id", ["abc", "0", "99999999", "99999999999999999999"])
    async def test_bad_comment_id(
        self,
        comment_service: CommentService,
        make_blog,
        comment_id: str,
    ) -> None:
        blog = await make_blog("First Blog", is_published=True)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.get(str(blog.id), comment_id)
        assert exc_info.value.detail == "Comment Not Found."

    async def test_missing_blog(self, comment_service: CommentService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.get("99999999", "1")
        assert exc_info.value.detail == "Blog Entry Not Found."


class TestListByBlog:
    """Tests for CommentService.list_by_blog."""

    async def test_newest_first(
        self,
        comment_service: CommentService,
        make_blog,
        make_comment,
    ) -> None:
        blog = await make_blog("Busy Blog", is_published=True)
        first = await make_comment(blog, "first")
        second = await make_comment(blog, "second")
        third = await make_comment(blog, "third")

        page = await comment_service.list_by_blog(str(blog.id))

        assert [c.id for c in page.items] == [third.id, second.id, first.id]
        assert page.total_count == 3
        assert page.total_pages == 1

    async def test_only_that_blogs_comments(
        self,
        comment_service: CommentService,
        make_blog,
        make_comment,
    ) -> None:
        blog = await make_blog("Busy Blog", is_published=True)
        other = await make_blog("Quiet Blog", is_published=True)
        await make_comment(blog)
        await make_comment(other)

        page = await comment_service.list_by_blog(str(blog.id))

        assert page.total_count == 1
        assert all(c.blog_id == blog.id for c in page.items)

    async def test_paging(
        self,
        comment_service: CommentService,
        make_blog,
        make_comment,
    ) -> None:
        blog = await make_blog("Busy Blog", is_published=True)
        for i in range(5):
            await make_comment(blog, f"comment {i}")

        page = await comment_service.list_by_blog(str(blog.id), page="2", per_page="2")
        assert len(page.items) == 2
        assert page.total_pages == 3

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.list_by_blog(str(blog.id), page="4", per_page="2")
        assert exc_info.value.detail == "No Comments Found for This Query."

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.list_by_blog(str(blog.id), page="99999999999999999999")
        assert exc_info.value.detail == "No Comments Found for This Query."

    async def test_per_page_too_large(self, comment_service: CommentService, make_blog) -> None:
        blog = await make_blog("Busy Blog", is_published=True)

        with pytest.raises(BadRequestError) as exc_info:
            await comment_service.list_by_blog(str(blog.id), per_page="51")
        assert exc_info.value.detail == "Comments Per Page Can't be greater than 50."

    async def test_missing_blog(self, comment_service: CommentService) -> None:
        with pytest.raises(NotFoundError):
            await comment_service.list_by_blog("99999999")

    async def test_no_comments(self, comment_service: CommentService, make_blog) -> None:
        blog = await make_blog("Quiet Blog", is_published=True)

        with pytest.raises(NotFoundError):
            await comment_service.list_by_blog(str(blog.id))
