"""Abstract repository interface (port) for back-office accounts."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from backoffice.application.interfaces.write_result import WriteResult
from backoffice.domain.entities import User


class UserRepository(ABC):
    """Port for the ``users`` table."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def insert(self, user: User) -> WriteResult:
        ...

    @abstractmethod
    async def update(self, user_id: int, fields: dict[str, Any]) -> WriteResult:
        ...

    @abstractmethod
    async def delete_by_email(self, email: str) -> WriteResult:
        ...

    @abstractmethod
    async def list_all(self) -> list[User]:
        ...

    @abstractmethod
    async def touch_last_connection(self, email: str, when: datetime) -> WriteResult:
        """Stamp ``last_connection_at`` for the account behind ``email``."""
        ...
