# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before blogger is imported anywhere
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession  # noqa: E402

from blogger.db import get_session  # noqa: E402
from blogger.main import blog_app, comment_app  # noqa: E402
from blogger.models import BlogDB, CommentDB  # noqa: E402
from blogger.repositories import BlogRepository, CommentRepository  # noqa: E402
from blogger.services import BlogService, CommentService  # noqa: E402
from blogger.utils.helpers import utc_now  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[SQLModelAsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
def blog_repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
def comment_repo(session: AsyncSession) -> CommentRepository:
    return CommentRepository(session)


@pytest.fixture
def blog_service(blog_repo: BlogRepository) -> BlogService:
    return BlogService(blog_repo)


@pytest.fixture
def comment_service(
    blog_repo: BlogRepository,
    comment_repo: CommentRepository,
) -> CommentService:
    return CommentService(blog_repo, comment_repo)


@pytest.fixture
def make_blog(session: AsyncSession):
    """Insert a blog row directly, bypassing the service rules."""

    async def _make_blog(
        title: str,
        *,
        author: str = "Jane Doe",
        is_published: bool = False,
    ) -> BlogDB:
        now = utc_now()
        blog = BlogDB(
            title=title,
            post="",
            author=author,
            tags=[],
            is_published=is_published,
            created_at=now,
            updated_at=now,
        )
        session.add(blog)
        await session.flush()
        await session.refresh(blog)
        return blog

    return _make_blog


@pytest.fixture
def make_comment(session: AsyncSession):
    """Insert a comment row directly under ``blog``."""

    async def _make_comment(blog: BlogDB, text: str = "Nice post", user: str = "john") -> CommentDB:
        now = utc_now()
        comment = CommentDB(
            comment=text,
            user=user,
            blog_id=blog.id,
            created_at=now,
            updated_at=now,
        )
        session.add(comment)
        await session.flush()
        await session.refresh(comment)
        return comment

    return _make_comment


@pytest.fixture
async def clients(
    session_maker: async_sessionmaker[SQLModelAsyncSession],
) -> AsyncGenerator[tuple[AsyncClient, AsyncClient]]:
    """Blog and comment service clients sharing one test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    for app in (blog_app, comment_app):
        app.dependency_overrides[get_session] = override_get_session

    async with (
        AsyncClient(transport=ASGITransport(app=blog_app), base_url="http://test") as blog,
        AsyncClient(transport=ASGITransport(app=comment_app), base_url="http://test") as comment,
    ):
        yield blog, comment

    for app in (blog_app, comment_app):
        app.dependency_overrides.clear()


@pytest.fixture
def blog_client(clients: tuple[AsyncClient, AsyncClient]) -> AsyncClient:
    return clients[0]


@pytest.fixture
def comment_client(clients: tuple[AsyncClient, AsyncClient]) -> AsyncClient:
    return clients[1]
