"""Application service (use case) for the article lifecycle.

An article is stored as two rows: the article itself and its entry in the
slug index. There is no transaction spanning both tables, so every paired
operation is a two-step sequence whose individual outcomes are reported
back to the caller instead of being collapsed into one flag.

Workflow::

    Draft(F,F) --validate(T)--> Validated(T,F) --ship(T)--> Live(T,T)
    Live --ship(F)--> Validated --validate(F)--> Draft
    Validated | Live --update--> Draft
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from backoffice.application import messages
from backoffice.application.interfaces import (
    ArticleRepository,
    SlugRepository,
    WriteResult,
    WriteStatus,
    is_written,
)
from backoffice.application.schemas import ArticleCreate, ArticleUpdate
from backoffice.domain.entities import Actor, Article, ArticleUrl, Slug
from backoffice.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InputValidationError,
    ShipBeforeValidationError,
    StorageError,
    UnauthenticatedError,
)
from backoffice.domain.slugs import derive_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateOutcome:
    """Both halves of article creation, reported independently."""

    article_id: int | None
    article_status: int
    slug_status: int | None = None
    slug_error: Exception | None = None

    @property
    def article_created(self) -> bool:
        return self.article_status == WriteStatus.CREATED

    @property
    def slug_created(self) -> bool:
        return self.slug_status == WriteStatus.CREATED

    @property
    def success(self) -> bool:
        return self.article_created and self.slug_created


@dataclass(frozen=True)
class ValidateOutcome:
    """Article write status plus the slug mirror status (``None`` if skipped)."""

    article_status: int
    slug_status: int | None = None
    slug_error: Exception | None = None

    @property
    def success(self) -> bool:
        return is_written(self.article_status)

    @property
    def article_missing(self) -> bool:
        return self.article_status == WriteStatus.NO_CONTENT

    @property
    def slug_synced(self) -> bool:
        return is_written(self.slug_status)


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of the concurrent slug + article deletion.

    Only a removal on both sides counts as success; a single failing side
    fails the whole operation even though the other row may be gone.
    """

    article_status: int | None
    slug_status: int | None
    article_error: BaseException | None = None
    slug_error: BaseException | None = None

    @property
    def errored(self) -> bool:
        return self.article_error is not None or self.slug_error is not None

    @property
    def success(self) -> bool:
        return (
            not self.errored
            and self.article_status == WriteStatus.OK
            and self.slug_status == WriteStatus.OK
        )


def _require_actor(actor: Actor | None) -> Actor:
    if actor is None:
        raise UnauthenticatedError()
    return actor


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ArticleService:
    """Orchestrates the article workflow over the article and slug ports (DI)."""

    def __init__(self, articles: ArticleRepository, slugs: SlugRepository):
        self._articles = articles
        self._slugs = slugs

    async def get_article(self, article_id: int) -> Article:
        article = await self._articles.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_slug(self, slug: str) -> Article:
        article = await self._articles.get_by_slug(slug)
        if article is None:
            raise EntityNotFoundError("Article", slug)
        return article

    async def create_article(self, data: ArticleCreate, actor: Actor | None) -> CreateOutcome:
        """Insert the article, then its slug row if that insert reports CREATED."""
        actor = _require_actor(actor)
        slug = derive_slug(data.title)
        if not slug:
            raise InputValidationError({"title": messages.ARTICLE_TITLE_WITHOUT_SLUG})
        if await self._articles.get_by_slug(slug) is not None:
            raise DuplicateEntityError("Article", "slug", slug)

        created_at = _now()
        article = Article(
            slug=slug,
            title=data.title,
            introduction=data.introduction,
            main=data.main,
            main_audio_url=data.main_audio_url,
            url_to_main_illustration=data.url_to_main_illustration,
            urls=[ArticleUrl(type=u.type, url=u.url, credits=u.credits) for u in data.urls],
            author=actor.nickname,
            author_email=actor.email,
            validated=False,
            shipped=False,
            published_at=None,
            created_at=created_at,
            updated_at=created_at,
        )
        article_result = await self._articles.insert(article)
        if not article_result.created or article_result.row_id is None:
            logger.warning(
                "Article insert for slug '%s' returned status %s: slug row not written",
                slug,
                article_result.status,
            )
            return CreateOutcome(article_id=article_result.row_id, article_status=article_result.status)

        try:
            slug_result = await self._slugs.insert(
                Slug(
                    slug=slug,
                    article_id=article_result.row_id,
                    validated=article.validated,
                    created_at=created_at,
                )
            )
        except StorageError as exc:
            logger.warning(
                "Article %s created but its slug row failed: %s", article_result.row_id, exc
            )
            return CreateOutcome(
                article_id=article_result.row_id,
                article_status=article_result.status,
                slug_error=exc,
            )

        logger.info(
            "Article %s '%s' created by %s (slug status %s)",
            article_result.row_id,
            slug,
            actor.email,
            slug_result.status,
        )
        return CreateOutcome(
            article_id=article_result.row_id,
            article_status=article_result.status,
            slug_status=slug_result.status,
        )

    async def update_article(
        self, article_id: int, data: ArticleUpdate, actor: Actor | None
    ) -> WriteResult:
        """Apply content edits and send the article back to draft.

        Only the article row is written. The slug row keeps its previous
        ``validated`` value until the next validate action.
        """
        actor = _require_actor(actor)
        await self.get_article(article_id)

        fields: dict[str, Any] = {}
        for name, value in data.model_dump(exclude_unset=True, exclude={"urls"}).items():
            if value is not None:
                fields[name] = value
        if data.urls is not None:
            fields["urls"] = [ArticleUrl(type=u.type, url=u.url, credits=u.credits) for u in data.urls]
        fields.update(
            validated=False,
            shipped=False,
            updated_at=_now(),
            updated_by=actor.email,
        )

        result = await self._articles.update(article_id, fields)
        if result.matched_nothing:
            logger.warning("Article %s vanished before its update was written", article_id)
            return result
        logger.info("Article %s updated by %s, back to draft", article_id, actor.email)
        return result

    async def delete_article(self, article_id: int, actor: Actor | None) -> DeleteOutcome:
        """Delete slug and article rows concurrently and report both sides."""
        actor = _require_actor(actor)
        slug_outcome, article_outcome = await asyncio.gather(
            self._slugs.delete_by_article(article_id),
            self._articles.delete(article_id),
            return_exceptions=True,
        )

        outcome = DeleteOutcome(
            article_status=None if isinstance(article_outcome, BaseException) else article_outcome.status,
            slug_status=None if isinstance(slug_outcome, BaseException) else slug_outcome.status,
            article_error=article_outcome if isinstance(article_outcome, BaseException) else None,
            slug_error=slug_outcome if isinstance(slug_outcome, BaseException) else None,
        )
        if outcome.success:
            logger.info("Article %s deleted by %s", article_id, actor.email)
        else:
            logger.warning(
                "Delete of article %s incomplete: article=%s slug=%s",
                article_id,
                outcome.article_error or outcome.article_status,
                outcome.slug_error or outcome.slug_status,
            )
        return outcome

    async def validate_article(
        self, article_id: int, validated: bool, actor: Actor | None
    ) -> ValidateOutcome:
        """Set the review flag, then mirror it to the slug row.

        The mirror write only happens when the article write reports
        CREATED; any other status leaves the slug row untouched.
        """
        actor = _require_actor(actor)
        await self.get_article(article_id)

        article_result = await self._articles.update(
            article_id,
            {"validated": validated, "updated_at": _now(), "updated_by": actor.email},
        )
        if not article_result.created:
            logger.warning(
                "Article %s validation returned status %s: slug mirror skipped",
                article_id,
                article_result.status,
            )
            return ValidateOutcome(article_status=article_result.status)

        try:
            slug_result = await self._slugs.update_validated(article_id, validated)
        except StorageError as exc:
            logger.warning("Article %s validated but slug mirror failed: %s", article_id, exc)
            return ValidateOutcome(article_status=article_result.status, slug_error=exc)

        logger.info("Article %s validated=%s by %s", article_id, validated, actor.email)
        return ValidateOutcome(article_status=article_result.status, slug_status=slug_result.status)

    async def ship_article(self, article_id: int, shipped: bool, actor: Actor | None) -> WriteResult:
        """Put an article online or take it offline.

        Going online requires the article to be validated; the check runs
        before any write. ``published_at`` is left as is.
        """
        actor = _require_actor(actor)
        article = await self.get_article(article_id)
        if shipped and not article.validated:
            raise ShipBeforeValidationError(article_id)

        result = await self._articles.update(
            article_id,
            {"shipped": shipped, "updated_at": _now(), "updated_by": actor.email},
        )
        if result.matched_nothing:
            logger.warning("Article %s vanished before shipped=%s was written", article_id, shipped)
            return result
        logger.info("Article %s shipped=%s by %s", article_id, shipped, actor.email)
        return result
