"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from backoffice.application.interfaces.write_result import WriteResult
from backoffice.domain.entities import Article


class ArticleRepository(ABC):
    """Port for the ``articles`` table: implemented in the infrastructure layer.

    Owns no business rules. Failures of the backing store surface as
    ``StorageError``; nothing is retried.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve a single article by its slug."""
        ...

    @abstractmethod
    async def insert(self, article: Article) -> WriteResult:
        """Persist a new article. ``row_id`` carries the assigned ID."""
        ...

    @abstractmethod
    async def update(self, article_id: int, fields: dict[str, Any]) -> WriteResult:
        """Write the given column values on one article row."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> WriteResult:
        """Delete one article row."""
        ...

    @abstractmethod
    async def search(self, term: str) -> list[Article]:
        """Articles whose title, introduction or main text contains ``term``."""
        ...
