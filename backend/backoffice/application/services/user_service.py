"""Application service (use case) for back-office accounts."""

import logging
from datetime import datetime, timezone
from typing import Any

from backoffice.application.interfaces import UserRepository, WriteResult
from backoffice.application.schemas import UserCreate, UserUpdate
from backoffice.domain.entities import Actor, User
from backoffice.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    UnauthenticatedError,
)
from backoffice.domain.permissions import permissions_for_role

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates account management. Depends on the user repository port (DI)."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, email: str) -> User:
        user = await self._repository.get_by_email(email)
        if user is None:
            raise EntityNotFoundError("User", email)
        return user

    async def list_users(self) -> list[User]:
        return await self._repository.list_all()

    async def create_user(self, data: UserCreate, actor: Actor | None) -> WriteResult:
        if actor is None:
            raise UnauthenticatedError()
        if await self._repository.get_by_email(data.email) is not None:
            raise DuplicateEntityError("User", "email", data.email)

        now = datetime.now(timezone.utc)
        user = User(
            email=data.email,
            tiers_service_ident=data.tiers_service_ident,
            role=data.role,
            permissions=permissions_for_role(data.role),
            created_at=now,
            last_connection_at=now,
        )
        result = await self._repository.insert(user)
        logger.info("User %s (%s) created by %s", data.email, data.role.value, actor.email)
        return result

    async def update_user(self, user_id: int, data: UserUpdate, actor: Actor | None) -> WriteResult:
        """Edit an account. A role change copies the new preset unless permissions are given."""
        if actor is None:
            raise UnauthenticatedError()
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        fields: dict[str, Any] = {}
        if data.tiers_service_ident is not None:
            fields["tiers_service_ident"] = data.tiers_service_ident
        if data.role is not None:
            fields["role"] = data.role
            fields["permissions"] = permissions_for_role(data.role)
        if data.permissions is not None:
            fields["permissions"] = list(data.permissions)
        fields["updated_at"] = datetime.now(timezone.utc)
        fields["updated_by"] = actor.email

        result = await self._repository.update(user_id, fields)
        logger.info("User %s updated by %s", user.email, actor.email)
        return result

    async def delete_user(self, email: str, actor: Actor | None) -> WriteResult:
        if actor is None:
            raise UnauthenticatedError()
        result = await self._repository.delete_by_email(email)
        logger.info("User %s deleted by %s (status %s)", email, actor.email, result.status)
        return result

    async def log_connection(self, actor: Actor) -> User | None:
        """Stamp ``last_connection_at`` when a session starts; unknown emails are ignored."""
        user = await self._repository.get_by_email(actor.email)
        if user is None:
            logger.warning("Session started for %s who has no back-office account", actor.email)
            return None
        await self._repository.touch_last_connection(actor.email, datetime.now(timezone.utc))
        return user
