"""SQLAlchemy repositories against a throwaway SQLite database."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from backoffice.application.interfaces import WriteStatus
from backoffice.domain.entities import Article, ArticleUrl, Slug, UrlType, User, UserRole
from backoffice.domain.exceptions import StorageError
from backoffice.infrastructure.database import Base
from backoffice.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemySlugRepository,
    SQLAlchemyUserRepository,
)


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def _article(slug: str, title: str) -> Article:
    return Article(
        slug=slug,
        title=title,
        introduction="An introduction about rivers",
        main="Main text that mentions Glaciers and other things",
        main_audio_url="https://cdn.example.org/a.mp3",
        url_to_main_illustration="https://cdn.example.org/a.jpg",
        author="writer",
        author_email="writer@example.org",
        urls=[ArticleUrl(type=UrlType.VIDEOS, url="https://video.example.org/1", credits="AFP")],
    )


@pytest.mark.asyncio
async def test_article_write_statuses(session_factory):
    repo = SQLAlchemyArticleRepository(session_factory)

    inserted = await repo.insert(_article("rivers", "Rivers"))
    assert inserted.status == WriteStatus.CREATED
    assert inserted.row_id is not None

    updated = await repo.update(inserted.row_id, {"validated": True})
    assert updated.status == WriteStatus.CREATED
    assert (await repo.update(9999, {"validated": True})).status == WriteStatus.NO_CONTENT

    stored = await repo.get_by_slug("rivers")
    assert stored.validated is True
    assert stored.urls == [ArticleUrl(type=UrlType.VIDEOS, url="https://video.example.org/1", credits="AFP")]

    assert (await repo.delete(inserted.row_id)).status == WriteStatus.OK
    assert (await repo.delete(inserted.row_id)).status == WriteStatus.NO_CONTENT
    assert await repo.get_by_id(inserted.row_id) is None


@pytest.mark.asyncio
async def test_article_search_is_case_insensitive(session_factory):
    repo = SQLAlchemyArticleRepository(session_factory)
    await repo.insert(_article("rivers", "Rivers"))
    await repo.insert(_article("mountains", "Mountains"))

    assert [a.slug for a in await repo.search("glaciers")] == ["rivers", "mountains"]
    assert [a.slug for a in await repo.search("mount")] == ["mountains"]
    assert await repo.search("100%") == []


@pytest.mark.asyncio
async def test_duplicate_slug_raises_storage_error(session_factory):
    repo = SQLAlchemyArticleRepository(session_factory)
    await repo.insert(_article("rivers", "Rivers"))

    with pytest.raises(StorageError):
        await repo.insert(_article("rivers", "Rivers again"))


@pytest.mark.asyncio
async def test_slug_index(session_factory):
    repo = SQLAlchemySlugRepository(session_factory)
    now = datetime.now(timezone.utc)
    await repo.insert(Slug(slug="rivers", article_id=1, created_at=now))
    await repo.insert(Slug(slug="mountains", article_id=2, created_at=now))

    assert (await repo.update_validated(1, True)).status == WriteStatus.CREATED
    assert (await repo.update_validated(42, True)).status == WriteStatus.NO_CONTENT

    rows = await repo.list_all()
    assert [(s.slug, s.validated) for s in rows] == [("rivers", True), ("mountains", False)]
    assert [s.slug for s in await repo.search("RIV")] == ["rivers"]

    assert (await repo.delete_by_article(2)).status == WriteStatus.OK
    assert (await repo.delete_by_article(2)).status == WriteStatus.NO_CONTENT


@pytest.mark.asyncio
async def test_user_repository(session_factory):
    repo = SQLAlchemyUserRepository(session_factory)
    result = await repo.insert(
        User(
            email="w@example.org",
            tiers_service_ident="auth0|w",
            role=UserRole.CONTRIBUTOR,
            permissions=["read:articles"],
        )
    )

    await repo.update(result.row_id, {"role": UserRole.ADMIN, "permissions": ["read:articles", "ship:articles"]})
    when = datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert (await repo.touch_last_connection("w@example.org", when)).status == WriteStatus.CREATED

    user = await repo.get_by_email("w@example.org")
    assert user.role == UserRole.ADMIN
    assert user.permissions == ["read:articles", "ship:articles"]
    assert user.last_connection_at is not None
    assert [u.email for u in await repo.list_all()] == ["w@example.org"]

    assert (await repo.delete_by_email("w@example.org")).status == WriteStatus.OK
    assert await repo.get_by_id(result.row_id) is None
