"""Concrete slug index repository backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.application.interfaces import SlugRepository, WriteResult, WriteStatus
from backoffice.domain.entities import Slug
from backoffice.infrastructure.database.models import SlugModel
from backoffice.infrastructure.database.session import storage_session


class SQLAlchemySlugRepository(SlugRepository):
    """Implements the SlugRepository port; rows are addressed by ``article_id``."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: SlugModel) -> Slug:
        return Slug(
            id=model.id,
            slug=model.slug,
            article_id=model.article_id,
            validated=model.validated,
            created_at=model.created_at,
        )

    async def insert(self, slug: Slug) -> WriteResult:
        async with storage_session(self._session_factory, "slugs.insert") as session:
            model = SlugModel(
                slug=slug.slug,
                article_id=slug.article_id,
                validated=slug.validated,
                created_at=slug.created_at,
            )
            session.add(model)
            await session.flush()
            return WriteResult(status=WriteStatus.CREATED, row_id=model.id)

    async def update_validated(self, article_id: int, validated: bool) -> WriteResult:
        async with storage_session(self._session_factory, "slugs.update_validated") as session:
            result = await session.execute(
                update(SlugModel)
                .where(SlugModel.article_id == article_id)
                .values(validated=validated)
            )
            status = WriteStatus.CREATED if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status)

    async def delete_by_article(self, article_id: int) -> WriteResult:
        async with storage_session(self._session_factory, "slugs.delete_by_article") as session:
            result = await session.execute(delete(SlugModel).where(SlugModel.article_id == article_id))
            status = WriteStatus.OK if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status)

    async def search(self, term: str) -> list[Slug]:
        stmt = (
            select(SlugModel)
            .where(SlugModel.slug.icontains(term, autoescape=True))
            .order_by(SlugModel.id)
        )
        async with storage_session(self._session_factory, "slugs.search") as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def list_all(self) -> list[Slug]:
        async with storage_session(self._session_factory, "slugs.list_all") as session:
            result = await session.execute(select(SlugModel).order_by(SlugModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]
