# tests/services/test_blog_service.py
"""Tests for blogger/services/blog.py module."""

import pytest
from sqlalchemy import Delete
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    TransactionError,
    ValidationError,
)
from blogger.models import BlogDB
from blogger.repositories import BlogRepository, CommentRepository
from blogger.schemas import BlogCreate
from blogger.services import BlogService


class TestCreate:
    """Tests for BlogService.create."""

    async def test_creates_draft_and_echoes_fields(self, blog_service: BlogService) -> None:
        blog = await blog_service.create(
            {"title": "Async Python", "post": "Body", "author": "Jane", "tags": ["py"]},
        )

        assert blog.id is not None
        assert blog.title == "Async Python"
        assert blog.post == "Body"
        assert blog.author == "Jane"
        assert blog.tags == ["py"]
        assert blog.is_published is False

    async def test_optional_fields_default(self, blog_service: BlogService) -> None:
        blog = await blog_service.create({"title": "Minimal", "author": "Jane"})

        assert blog.post == ""
        assert blog.tags == []

    async def test_accepts_validated_model(self, blog_service: BlogService) -> None:
        blog = await blog_service.create(BlogCreate(title="From Model", author="Jane"))
        assert blog.title == "From Model"

    async def test_same_title_other_case_conflicts(self, blog_service: BlogService) -> None:
        await blog_service.create({"title": "Title1", "author": "Alice"})

        with pytest.raises(ConflictError) as exc_info:
            await blog_service.create({"title": "title1", "author": "Bob"})

        assert exc_info.value.detail == "This Blog Entry Already Exists."
        assert exc_info.value.status_code == 409

    async def test_candidate_contained_in_existing_title_conflicts(
        self,
        blog_service: BlogService,
    ) -> None:
        await blog_service.create({"title": "Learning FastAPI Quickly", "author": "Alice"})

        with pytest.raises(ConflictError):
            await blog_service.create({"title": "fastapi", "author": "Bob"})

    async def test_candidate_containing_existing_title_conflicts(
        self,
        blog_service: BlogService,
    ) -> None:
        await blog_service.create({"title": "FastAPI", "author": "Alice"})

        with pytest.raises(ConflictError):
            await blog_service.create({"title": "Mastering fastapi in a week", "author": "Bob"})

    async def test_unrelated_titles_do_not_conflict(self, blog_service: BlogService) -> None:
        await blog_service.create({"title": "Django Tips", "author": "Alice"})
        blog = await blog_service.create({"title": "Flask Tricks", "author": "Bob"})
        assert blog.id is not None

    async def test_wildcards_in_title_are_literal(self, blog_service: BlogService) -> None:
        await blog_service.create({"title": "Plain Words", "author": "Alice"})
        blog = await blog_service.create({"title": "100% off", "author": "Bob"})
        assert blog.title == "100% off"

    @pytest.mark.parametrize(
        ("existing", "candidate"),
        [("a_c", "xabcx"), ("100% Go", "100 Golang tips")],
    )
    async def test_wildcards_in_stored_title_are_literal(
        self,
        blog_service: BlogService,
        existing: str,
        candidate: str,
    ) -> None:
        await blog_service.create({"title": existing, "author": "Alice"})
        blog = await blog_service.create({"title": candidate, "author": "Bob"})
        assert blog.title == candidate

    async def test_stored_title_with_wildcard_still_matches_itself(
        self,
        blog_service: BlogService,
    ) -> None:
        await blog_service.create({"title": "snake_case tips", "author": "Alice"})

        with pytest.raises(ConflictError):
            await blog_service.create({"title": "All SNAKE_CASE Tips Explained", "author": "Bob"})

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ({"author": "Jane"}, '"title" is required'),
            ({"title": "Hi", "author": "Jane"}, '"title" String should have at least 3 characters'),
            ({"title": "Valid", "author": "Jane", "likes": 3}, '"likes" is not allowed'),
            ({"title": "Valid"}, '"author" is required'),
        ],
    )
    async def test_invalid_payload(
        self,
        blog_service: BlogService,
        payload: dict,
        message: str,
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await blog_service.create(payload)

        assert exc_info.value.detail == message
        assert exc_info.value.status_code == 400


class TestGet:
    """Tests for BlogService.get."""

    async def test_returns_draft(self, blog_service: BlogService, make_blog) -> None:
        created = await make_blog("Hidden Draft")

        blog = await blog_service.get(str(created.id))

        assert blog.id == created.id
        assert blog.is_published is False

    @pytest.mark.parametrize("blog_id", ["abc", "0", "-1", "1.5", "12abc", ""])
    async def test_invalid_id(self, blog_service: BlogService, blog_id: str) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await blog_service.get(blog_id)
        assert exc_info.value.detail == "Invalid Blog Id."

    async def test_missing_blog(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await blog_service.get("99999999")
        assert exc_info.value.detail == "Blog Entry Not Found."


class TestPublish:
    """Tests for BlogService.publish."""

    async def test_publish_then_publish_again(self, blog_service: BlogService, make_blog) -> None:
        created = await make_blog("Ready To Ship")

        published = await blog_service.publish(str(created.id))
        assert published.is_published is True

        with pytest.raises(BadRequestError) as exc_info:
            await blog_service.publish(str(created.id))
        assert exc_info.value.detail == "Blog Entry is Already Published."

    async def test_publish_missing(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError):
            await blog_service.publish("424242")

    async def test_publish_invalid_id(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError):
            await blog_service.publish("not-a-number")

    async def test_conditional_update_only_matches_drafts(
        self,
        blog_repo: BlogRepository,
        make_blog,
    ) -> None:
        created = await make_blog("Racing Publish")

        assert await blog_repo.mark_published(created) is True
        assert await blog_repo.mark_published(created) is False


class TestDelete:
    """Tests for BlogService.delete."""

    async def test_removes_blog_and_comments(
        self,
        blog_service: BlogService,
        comment_repo: CommentRepository,
        make_blog,
        make_comment,
    ) -> None:
        blog = await make_blog("Short Lived", is_published=True)
        other = await make_blog("Survivor", is_published=True)
        for _ in range(3):
            await make_comment(blog)
        await make_comment(other)

        await blog_service.delete(str(blog.id))

        with pytest.raises(NotFoundError):
            await blog_service.get(str(blog.id))
        assert (await comment_repo.list_for_blog(blog.id, 0, 50))[1] == 0
        assert (await comment_repo.list_for_blog(other.id, 0, 50))[1] == 1

    async def test_failed_blog_delete_keeps_comments(
        self,
        blog_service: BlogService,
        comment_repo: CommentRepository,
        session: AsyncSession,
        make_blog,
        make_comment,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        blog = await make_blog("Sticky Blog", is_published=True)
        await make_comment(blog)
        await make_comment(blog)
        blog_id = blog.id
        await session.commit()

        execute = session.execute

        async def fail_blog_delete(statement, *args, **kwargs):
            if isinstance(statement, Delete) and statement.table is BlogDB.__table__:
                raise OperationalError("DELETE FROM blogs", {}, Exception("disk I/O error"))
            return await execute(statement, *args, **kwargs)

        monkeypatch.setattr(session, "execute", fail_blog_delete)

        with pytest.raises(TransactionError):
            await blog_service.delete(str(blog_id))

        assert (await blog_service.get(str(blog_id))).id == blog_id
        assert (await comment_repo.list_for_blog(blog_id, 0, 50))[1] == 2

    async def test_delete_missing(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError):
            await blog_service.delete("99999999")

    async def test_id_beyond_primary_key_range(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await blog_service.delete("99999999999999999999")
        assert exc_info.value.detail == "Invalid Blog Id."


class TestListing:
    """Tests for BlogService.list_all and list_published."""

    async def test_list_all_includes_drafts_ordered_by_title(
        self,
        blog_service: BlogService,
        make_blog,
    ) -> None:
        await make_blog("Charlie", is_published=True)
        await make_blog("Alpha")
        await make_blog("Bravo", is_published=True)

        page = await blog_service.list_all()

        assert [blog.title for blog in page.items] == ["Alpha", "Bravo", "Charlie"]
        assert page.total_count == 3
        assert page.page == 1
        assert page.per_page == 50
        assert page.total_pages == 1

    async def test_list_published_excludes_drafts(
        self,
        blog_service: BlogService,
        make_blog,
    ) -> None:
        await make_blog("Charlie", is_published=True)
        await make_blog("Alpha")
        await make_blog("Bravo", is_published=True)

        page = await blog_service.list_published()

        assert [blog.title for blog in page.items] == ["Bravo", "Charlie"]
        assert page.total_count == 2

    async def test_title_filter_is_case_insensitive(
        self,
        blog_service: BlogService,
        make_blog,
    ) -> None:
        await make_blog("Python Basics")
        await make_blog("Advanced PYTHON")
        await make_blog("Rust Intro")

        page = await blog_service.list_all(title="python")

        assert [blog.title for blog in page.items] == ["Advanced PYTHON", "Python Basics"]
        assert page.total_count == 2

    async def test_paging_and_page_past_the_end(
        self,
        blog_service: BlogService,
        make_blog,
    ) -> None:
        for title in ("Alpha", "Bravo", "Charlie", "Delta", "Echo"):
            await make_blog(title)

        second = await blog_service.list_all(page="2", per_page="2")
        assert [blog.title for blog in second.items] == ["Charlie", "Delta"]
        assert second.total_count == 5
        assert second.total_pages == 3

        last = await blog_service.list_all(page="3", per_page="2")
        assert [blog.title for blog in last.items] == ["Echo"]

        with pytest.raises(NotFoundError) as exc_info:
            await blog_service.list_all(page="4", per_page="2")
        assert exc_info.value.detail == "No Blog Entries Found for This Query."

    @pytest.mark.parametrize("per_page", ["51", "1000", 51])
    async def test_per_page_too_large(
        self,
        blog_service: BlogService,
        make_blog,
        per_page: str | int,
    ) -> None:
        await make_blog("Alpha")

        with pytest.raises(BadRequestError) as exc_info:
            await blog_service.list_all(per_page=per_page)
        assert exc_info.value.detail == "Blogs Per Page Can't be greater than 50."

        with pytest.raises(BadRequestError):
            await blog_service.list_published(page="7", per_page=per_page, title="x")

    async def test_non_numeric_values_fall_back_to_defaults(
        self,
        blog_service: BlogService,
        make_blog,
    ) -> None:
        await make_blog("Alpha")

        page = await blog_service.list_all(page="abc", per_page="-4")

        assert page.page == 1
        assert page.per_page == 50

    async def test_empty_result(self, blog_service: BlogService) -> None:
        with pytest.raises(NotFoundError):
            await blog_service.list_published()
