"""Concrete user repository backed by SQLAlchemy."""

from datetime import datetime
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.application.interfaces import UserRepository, WriteResult, WriteStatus
from backoffice.domain.entities import User, UserRole
from backoffice.infrastructure.database.models import UserModel
from backoffice.infrastructure.database.session import storage_session


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            tiers_service_ident=model.tiers_service_ident,
            role=UserRole(model.role),
            permissions=list(model.permissions or []),
            created_at=model.created_at,
            last_connection_at=model.last_connection_at,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )

    async def get_by_email(self, email: str) -> User | None:
        async with storage_session(self._session_factory, "users.get_by_email") as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

    async def get_by_id(self, user_id: int) -> User | None:
        async with storage_session(self._session_factory, "users.get_by_id") as session:
            model = await session.get(UserModel, user_id)
            return self._to_entity(model) if model else None

    async def insert(self, user: User) -> WriteResult:
        async with storage_session(self._session_factory, "users.insert") as session:
            model = UserModel(
                email=user.email,
                tiers_service_ident=user.tiers_service_ident,
                role=user.role.value,
                permissions=list(user.permissions),
                created_at=user.created_at,
                last_connection_at=user.last_connection_at,
            )
            session.add(model)
            await session.flush()
            return WriteResult(status=WriteStatus.CREATED, row_id=model.id)

    async def update(self, user_id: int, fields: dict[str, Any]) -> WriteResult:
        values = dict(fields)
        if isinstance(values.get("role"), UserRole):
            values["role"] = values["role"].value
        async with storage_session(self._session_factory, "users.update") as session:
            result = await session.execute(
                update(UserModel).where(UserModel.id == user_id).values(**values)
            )
            status = WriteStatus.CREATED if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status, row_id=user_id)

    async def delete_by_email(self, email: str) -> WriteResult:
        async with storage_session(self._session_factory, "users.delete_by_email") as session:
            result = await session.execute(delete(UserModel).where(UserModel.email == email))
            status = WriteStatus.OK if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status)

    async def list_all(self) -> list[User]:
        async with storage_session(self._session_factory, "users.list_all") as session:
            result = await session.execute(select(UserModel).order_by(UserModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def touch_last_connection(self, email: str, when: datetime) -> WriteResult:
        async with storage_session(self._session_factory, "users.touch_last_connection") as session:
            result = await session.execute(
                update(UserModel).where(UserModel.email == email).values(last_connection_at=when)
            )
            status = WriteStatus.CREATED if result.rowcount else WriteStatus.NO_CONTENT
            return WriteResult(status=status)
