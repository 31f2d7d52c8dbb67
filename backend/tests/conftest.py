"""Shared in-memory fakes implementing the repository and session ports."""

from dataclasses import replace
from datetime import datetime
from typing import Any

import pytest

from backoffice.application.interfaces import (
    ArticleRepository,
    SessionProvider,
    SlugRepository,
    UserRepository,
    WriteResult,
    WriteStatus,
    is_written,
)
from backoffice.domain.entities import Actor, Article, Slug, User, UserRole
from backoffice.domain.exceptions import StorageError
from backoffice.domain.permissions import permissions_for_role


class FakeArticleRepository(ArticleRepository):
    """In-memory article table.

    ``statuses`` overrides the status a write reports, ``fail_on`` makes
    the named operations raise ``StorageError``.
    """

    def __init__(self):
        self.rows: dict[int, Article] = {}
        self.calls: list[str] = []
        self.statuses: dict[str, int] = {}
        self.fail_on: set[str] = set()
        self._next_id = 1

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StorageError(f"articles.{operation}", "boom")

    async def get_by_id(self, article_id: int) -> Article | None:
        row = self.rows.get(article_id)
        return replace(row) if row else None

    async def get_by_slug(self, slug: str) -> Article | None:
        for row in self.rows.values():
            if row.slug == slug:
                return replace(row)
        return None

    async def insert(self, article: Article) -> WriteResult:
        self._enter("insert")
        status = self.statuses.get("insert", WriteStatus.CREATED)
        if status != WriteStatus.CREATED:
            return WriteResult(status=status)
        stored = replace(article, id=self._next_id)
        self._next_id += 1
        self.rows[stored.id] = stored
        return WriteResult(status=WriteStatus.CREATED, row_id=stored.id)

    async def update(self, article_id: int, fields: dict[str, Any]) -> WriteResult:
        self._enter("update")
        if article_id not in self.rows:
            return WriteResult(status=WriteStatus.NO_CONTENT, row_id=article_id)
        status = self.statuses.get("update", WriteStatus.CREATED)
        if is_written(status):
            self.rows[article_id] = replace(self.rows[article_id], **fields)
        return WriteResult(status=status, row_id=article_id)

    async def delete(self, article_id: int) -> WriteResult:
        self._enter("delete")
        if self.rows.pop(article_id, None) is None:
            return WriteResult(status=WriteStatus.NO_CONTENT, row_id=article_id)
        return WriteResult(status=WriteStatus.OK, row_id=article_id)

    async def search(self, term: str) -> list[Article]:
        needle = term.lower()
        return [
            replace(row)
            for row in self.rows.values()
            if needle in row.title.lower()
            or needle in row.introduction.lower()
            or needle in row.main.lower()
        ]


class FakeSlugRepository(SlugRepository):
    """In-memory slug index keyed by ``article_id``, insertion ordered."""

    def __init__(self):
        self.rows: dict[int, Slug] = {}
        self.calls: list[str] = []
        self.statuses: dict[str, int] = {}
        self.fail_on: set[str] = set()
        self._next_id = 1

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StorageError(f"slugs.{operation}", "boom")

    def add(self, slug: str, article_id: int, validated: bool, created_at: datetime) -> Slug:
        row = Slug(slug=slug, article_id=article_id, validated=validated, id=self._next_id, created_at=created_at)
        self._next_id += 1
        self.rows[article_id] = row
        return row

    async def insert(self, slug: Slug) -> WriteResult:
        self._enter("insert")
        row = self.add(slug.slug, slug.article_id, slug.validated, slug.created_at)
        return WriteResult(status=self.statuses.get("insert", WriteStatus.CREATED), row_id=row.id)

    async def update_validated(self, article_id: int, validated: bool) -> WriteResult:
        self._enter("update_validated")
        if article_id not in self.rows:
            return WriteResult(status=WriteStatus.NO_CONTENT)
        self.rows[article_id] = replace(self.rows[article_id], validated=validated)
        return WriteResult(status=WriteStatus.CREATED)

    async def delete_by_article(self, article_id: int) -> WriteResult:
        self._enter("delete_by_article")
        if self.rows.pop(article_id, None) is None:
            return WriteResult(status=WriteStatus.NO_CONTENT)
        return WriteResult(status=WriteStatus.OK)

    async def search(self, term: str) -> list[Slug]:
        return [replace(row) for row in self.rows.values() if term in row.slug]

    async def list_all(self) -> list[Slug]:
        return [replace(row) for row in self.rows.values()]


class FakeUserRepository(UserRepository):
    def __init__(self):
        self.rows: dict[int, User] = {}
        self.statuses: dict[str, int] = {}
        self.connections: list[str] = []
        self._next_id = 1

    def add(self, email: str, role: UserRole, permissions: list[str] | None = None) -> User:
        user = User(
            email=email,
            tiers_service_ident=f"auth0|{self._next_id}",
            role=role,
            permissions=permissions_for_role(role) if permissions is None else permissions,
            id=self._next_id,
        )
        self._next_id += 1
        self.rows[user.id] = user
        return user

    async def get_by_email(self, email: str) -> User | None:
        for user in self.rows.values():
            if user.email == email:
                return replace(user)
        return None

    async def get_by_id(self, user_id: int) -> User | None:
        user = self.rows.get(user_id)
        return replace(user) if user else None

    async def insert(self, user: User) -> WriteResult:
        stored = replace(user, id=self._next_id)
        self._next_id += 1
        self.rows[stored.id] = stored
        return WriteResult(status=WriteStatus.CREATED, row_id=stored.id)

    async def update(self, user_id: int, fields: dict[str, Any]) -> WriteResult:
        if user_id not in self.rows:
            return WriteResult(status=WriteStatus.NO_CONTENT, row_id=user_id)
        if self.statuses.get("update") == WriteStatus.NO_CONTENT:
            return WriteResult(status=WriteStatus.NO_CONTENT, row_id=user_id)
        self.rows[user_id] = replace(self.rows[user_id], **fields)
        return WriteResult(status=WriteStatus.CREATED, row_id=user_id)

    async def delete_by_email(self, email: str) -> WriteResult:
        for user_id, user in list(self.rows.items()):
            if user.email == email:
                del self.rows[user_id]
                return WriteResult(status=WriteStatus.OK)
        return WriteResult(status=WriteStatus.NO_CONTENT)

    async def list_all(self) -> list[User]:
        return [replace(u) for u in self.rows.values()]

    async def touch_last_connection(self, email: str, when: datetime) -> WriteResult:
        self.connections.append(email)
        for user_id, user in self.rows.items():
            if user.email == email:
                self.rows[user_id] = replace(user, last_connection_at=when)
                return WriteResult(status=WriteStatus.CREATED)
        return WriteResult(status=WriteStatus.NO_CONTENT)


class FakeSessionProvider(SessionProvider):
    """Maps known tokens to actors; anything else is anonymous."""

    def __init__(self, tokens: dict[str, Actor] | None = None):
        self.tokens = tokens or {}

    async def get_session(self, token: str | None) -> Actor | None:
        if token is None:
            return None
        return self.tokens.get(token)


@pytest.fixture
def article_repo() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def slug_repo() -> FakeSlugRepository:
    return FakeSlugRepository()


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def admin() -> Actor:
    return Actor(email="admin@example.org", nickname="admin")


@pytest.fixture
def contributor() -> Actor:
    return Actor(email="writer@example.org", nickname="writer")


@pytest.fixture
def article_payload() -> dict[str, Any]:
    return {
        "title": "Wash the Sins!",
        "introduction": "An introduction that is long enough to pass.",
        "main": "The main body of the article, which needs at least fifty characters.",
        "main_audio_url": "https://cdn.example.org/audio.mp3",
        "url_to_main_illustration": "https://cdn.example.org/cover.jpg",
        "urls": [{"type": "website", "url": "https://example.org/source", "credits": "Example"}],
    }


@pytest.fixture
def session_provider(admin, contributor) -> FakeSessionProvider:
    stranger = Actor(email="stranger@example.org", nickname="stranger")
    return FakeSessionProvider(
        {"admin-token": admin, "writer-token": contributor, "stranger-token": stranger}
    )
