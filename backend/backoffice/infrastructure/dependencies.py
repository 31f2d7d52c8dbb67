"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.application.interfaces import SessionProvider
from backoffice.application.services import (
    ActionDispatcher,
    ArticleService,
    ListingService,
    UserService,
)
from backoffice.config import get_settings
from backoffice.domain.entities import Actor
from backoffice.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemySlugRepository,
    SQLAlchemyUserRepository,
)
from backoffice.infrastructure.database.session import get_session_factory
from backoffice.infrastructure.identity import OAuthUserInfoSessionProvider


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_article_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with the article and slug repositories wired up."""
    yield ArticleService(
        SQLAlchemyArticleRepository(session_factory),
        SQLAlchemySlugRepository(session_factory),
    )


async def get_listing_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[ListingService, None]:
    """Provides the read-side ListingService with pagination defaults from settings."""
    settings = get_settings()
    yield ListingService(
        SQLAlchemyArticleRepository(session_factory),
        SQLAlchemySlugRepository(session_factory),
        default_page=settings.default_page,
        default_limit=settings.default_limit,
    )


async def get_user_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[UserService, None]:
    yield UserService(SQLAlchemyUserRepository(session_factory))


async def get_action_dispatcher(
    articles: ArticleService = Depends(get_article_service),
    users: UserService = Depends(get_user_service),
) -> AsyncGenerator[ActionDispatcher, None]:
    yield ActionDispatcher(articles, users)


async def get_session_provider() -> AsyncGenerator[SessionProvider, None]:
    """Provides the identity adapter configured against the OAuth issuer."""
    settings = get_settings()
    yield OAuthUserInfoSessionProvider(
        issuer_base_url=settings.auth_issuer_base_url,
        timeout=settings.auth_timeout_seconds,
    )


async def get_actor(
    authorization: str | None = Header(default=None),
    provider: SessionProvider = Depends(get_session_provider),
) -> Actor | None:
    """Resolve the ``Authorization: Bearer`` header into the current actor, if any."""
    return await provider.get_session(_bearer_token(authorization))
