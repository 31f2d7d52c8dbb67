"""Read side: public article listing, editor search and pagination."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from backoffice.application.interfaces import ArticleRepository, SlugRepository
from backoffice.domain.entities import Article, Slug
from backoffice.domain.exceptions import EntityNotFoundError, InputValidationError
from backoffice.domain.slugs import humanize_slug

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FRENCH_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)

# (context, target) → buttons shown on each result row
_ROW_ACTIONS: dict[tuple[str, str], tuple[str, ...]] = {
    ("article", "search"): ("open",),
    ("article", "update"): ("select",),
    ("article", "delete"): ("select",),
    ("article", "validate"): ("select",),
    ("article", "ship"): ("select",),
    ("article", "manage"): ("delete", "validate", "ship"),
    ("user", "manage"): ("update", "delete"),
    ("user", "update"): ("update", "delete"),
    ("user", "delete"): ("update", "delete"),
}


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class PublicEntry:
    id: int
    slug: str
    label: str
    created_on: str
    href: str


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice ``items`` for ``page`` (1-based).

    ``total_pages`` is ``ceil(len / page_size)``. Pages outside
    ``[1, total_pages]`` are clamped instead of rejected.
    """
    if page_size < 1:
        raise InputValidationError({"page_size": "must be at least 1"})
    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    current = min(max(page, 1), max(total_pages, 1))
    start = (current - 1) * page_size
    return Page(
        items=list(items[start : current * page_size]),
        page=current,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )


def row_actions(context: str, target: str) -> list[str]:
    """Buttons offered on a result row. A fixed lookup, not a permission check."""
    return list(_ROW_ACTIONS.get((context, target), ()))


def format_french_date(value: datetime) -> str:
    """Long French date, e.g. ``1 janvier 2022``."""
    return f"{value.day} {_FRENCH_MONTHS[value.month - 1]} {value.year}"


def to_public_entry(slug: Slug) -> PublicEntry:
    return PublicEntry(
        id=slug.article_id,
        slug=slug.slug,
        label=humanize_slug(slug.slug),
        created_on=format_french_date(slug.created_at),
        href=f"article/{slug.slug}",
    )


class ListingService:
    """Projects the slug index and article table for the two read contexts."""

    def __init__(
        self,
        articles: ArticleRepository,
        slugs: SlugRepository,
        default_page: int = 1,
        default_limit: int = 10,
    ):
        self._articles = articles
        self._slugs = slugs
        self._default_page = default_page
        self._default_limit = default_limit

    def _page_args(self, page: int | None, page_size: int | None) -> tuple[int, int]:
        return (
            self._default_page if page is None else page,
            self._default_limit if page_size is None else page_size,
        )

    async def public_listing(
        self, page: int | None = None, page_size: int | None = None
    ) -> Page[PublicEntry]:
        """Validated slugs only, in the order the index returns them."""
        slugs = await self._slugs.list_all()
        entries = [to_public_entry(s) for s in slugs if s.validated]
        return paginate(entries, *self._page_args(page, page_size))

    async def public_article(self, slug: str) -> Article:
        """An article as shown on the public site: drafts are not exposed."""
        article = await self._articles.get_by_slug(slug)
        if article is None or not article.validated:
            raise EntityNotFoundError("Article", slug)
        return article

    async def search_slugs(
        self, term: str, page: int | None = None, page_size: int | None = None
    ) -> Page[Slug]:
        """Editor search over the slug index, validation state ignored."""
        needle = term.strip().lower()
        rows = await self._slugs.search(needle) if needle else await self._slugs.list_all()
        logger.debug("Slug search '%s' → %d rows", needle, len(rows))
        return paginate(rows, *self._page_args(page, page_size))

    async def search_articles(self, term: str) -> list[Article]:
        """Editor search over title, introduction and main text."""
        needle = term.strip().lower()
        if not needle:
            return []
        return await self._articles.search(needle)
