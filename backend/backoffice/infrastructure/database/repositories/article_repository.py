"""Concrete repository implementation backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.application.interfaces import ArticleRepository, WriteResult, WriteStatus
from backoffice.domain.entities import Article, ArticleUrl
from backoffice.infrastructure.database.models import ArticleModel
from backoffice.infrastructure.database.session import storage_session


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port; every call runs in its own session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            slug=model.slug,
            title=model.title,
            introduction=model.introduction,
            main=model.main,
            main_audio_url=model.main_audio_url,
            url_to_main_illustration=model.url_to_main_illustration,
            urls=[ArticleUrl.from_dict(item) for item in (model.urls or [])],
            author=model.author,
            author_email=model.author_email,
            validated=model.validated,
            shipped=model.shipped,
            published_at=model.published_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            slug=entity.slug,
            title=entity.title,
            introduction=entity.introduction,
            main=entity.main,
            main_audio_url=entity.main_audio_url,
            url_to_main_illustration=entity.url_to_main_illustration,
            urls=[u.to_dict() for u in entity.urls],
            author=entity.author,
            author_email=entity.author_email,
            validated=entity.validated,
            shipped=entity.shipped,
            published_at=entity.published_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            updated_by=entity.updated_by,
        )

    @staticmethod
    def _to_columns(fields: dict[str, Any]) -> dict[str, Any]:
        values = dict(fields)
        if "urls" in values:
            values["urls"] = [u.to_dict() if isinstance(u, ArticleUrl) else u for u in values["urls"]]
        return values

    async def get_by_id(self, article_id: int) -> Article | None:
        async with storage_session(self._session_factory, "articles.get_by_id") as session:
            result = await session.get(ArticleModel, article_id)
            return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        async with storage_session(self._session_factory, "articles.get_by_slug") as session:
            result = await session.execute(select(ArticleModel).where(ArticleModel.slug == slug))
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

    async def insert(self, article: Article) -> WriteResult:
        async with storage_session(self._session_factory, "articles.insert") as session:
            model = self._to_model(article)
            session.add(model)
            await session.flush()
            return WriteResult(status=WriteStatus.CREATED, row_id=model.id)

    async def update(self, article_id: int, fields: dict[str, Any]) -> WriteResult:
        async with storage_session(self._session_factory, "articles.update") as session:
            stmt = (
                update(ArticleModel)
                .where(ArticleModel.id == article_id)
                .values(**self._to_columns(fields))
            )
            result = await session.execute(stmt)
            status = WriteStatus.CREATED if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status, row_id=article_id)

    async def delete(self, article_id: int) -> WriteResult:
        async with storage_session(self._session_factory, "articles.delete") as session:
            result = await session.execute(delete(ArticleModel).where(ArticleModel.id == article_id))
            status = WriteStatus.OK if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status, row_id=article_id)

    async def search(self, term: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(
                or_(
                    ArticleModel.title.icontains(term, autoescape=True),
                    ArticleModel.introduction.icontains(term, autoescape=True),
                    ArticleModel.main.icontains(term, autoescape=True),
                )
            )
            .order_by(ArticleModel.id)
        )
        async with storage_session(self._session_factory, "articles.search") as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]
