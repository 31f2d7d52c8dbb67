"""Abstract repository interface (port) for the slug index."""

from abc import ABC, abstractmethod

from backoffice.application.interfaces.write_result import WriteResult
from backoffice.domain.entities import Slug


class SlugRepository(ABC):
    """Port for the ``slugs`` table, keyed by ``article_id``."""

    @abstractmethod
    async def insert(self, slug: Slug) -> WriteResult:
        """Persist the slug row paired with an article."""
        ...

    @abstractmethod
    async def update_validated(self, article_id: int, validated: bool) -> WriteResult:
        """Mirror an article's validation flag onto its slug row."""
        ...

    @abstractmethod
    async def delete_by_article(self, article_id: int) -> WriteResult:
        """Delete the slug row paired with ``article_id``."""
        ...

    @abstractmethod
    async def search(self, term: str) -> list[Slug]:
        """Slug rows whose text contains ``term`` (case-insensitive)."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Slug]:
        """Every slug row, in insertion order."""
        ...
