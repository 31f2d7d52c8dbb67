"""Editor read endpoints: search, account listing and lookups used by the forms.

Every route requires a session and a back-office account holding
``read:articles``; the account listing additionally requires ``update:user``.
The write side lives in ``actions``.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.application import messages
from backoffice.application.schemas import (
    ArticleResponse,
    ArticleSearchResponse,
    RolePermissionsResponse,
    RowActionsResponse,
    SlugResponse,
    SlugSearchResponse,
    UserListResponse,
    UserResponse,
)
from backoffice.application.services import (
    ArticleService,
    ListingService,
    UserService,
    paginate,
    row_actions,
)
from backoffice.config import get_settings
from backoffice.domain.entities import Actor, UserRole
from backoffice.domain.exceptions import (
    EntityNotFoundError,
    InputValidationError,
    UnauthenticatedError,
)
from backoffice.domain.permissions import has_permission, permission_label, permissions_for_role
from backoffice.infrastructure.dependencies import (
    get_actor,
    get_article_service,
    get_listing_service,
    get_user_service,
)
from backoffice.presentation.api.v1.endpoints._pagination import bad_request, pagination_meta


async def require_actor(actor: Actor | None = Depends(get_actor)) -> Actor:
    if actor is None:
        raise UnauthenticatedError(messages.NOT_LOGGED_IN)
    return actor


def require_permission(verb: str, resource: str):
    """Dependency factory: the actor's stored permissions must include ``verb:resource``."""

    async def dependency(
        actor: Actor = Depends(require_actor),
        users: UserService = Depends(get_user_service),
    ) -> Actor:
        try:
            user = await users.get_user(actor.email)
        except EntityNotFoundError:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=messages.FORBIDDEN)
        if not has_permission(user.permissions, verb, resource):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=messages.FORBIDDEN)
        return actor

    return dependency


router = APIRouter(
    prefix="/editor",
    tags=["Editor"],
    dependencies=[Depends(require_permission("read", "articles"))],
)


@router.get("/slugs", response_model=SlugSearchResponse)
async def search_slugs(
    term: str = "",
    page: int | None = Query(None),
    page_size: int | None = Query(None),
    service: ListingService = Depends(get_listing_service),
) -> SlugSearchResponse:
    """Search the slug index, validated or not."""
    try:
        result = await service.search_slugs(term, page=page, page_size=page_size)
    except InputValidationError as e:
        raise bad_request(e)
    return SlugSearchResponse(
        items=[SlugResponse.model_validate(s, from_attributes=True) for s in result.items],
        pagination=pagination_meta(result),
    )


@router.get("/articles", response_model=ArticleSearchResponse)
async def search_articles(
    term: str = "",
    service: ListingService = Depends(get_listing_service),
) -> ArticleSearchResponse:
    articles = await service.search_articles(term)
    return ArticleSearchResponse(
        items=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
    )


@router.get("/articles/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID, whatever its workflow state."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get(
    "/users",
    response_model=UserListResponse,
    dependencies=[Depends(require_permission("update", "user"))],
)
async def list_users(
    page: int | None = Query(None),
    page_size: int | None = Query(None),
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    settings = get_settings()
    users = await service.list_users()
    try:
        result = paginate(
            users,
            settings.default_page if page is None else page,
            settings.default_limit if page_size is None else page_size,
        )
    except InputValidationError as e:
        raise bad_request(e)
    return UserListResponse(
        items=[UserResponse.model_validate(u, from_attributes=True) for u in result.items],
        pagination=pagination_meta(result),
    )


@router.get("/roles/{role}/permissions", response_model=RolePermissionsResponse)
async def role_permissions(role: UserRole) -> RolePermissionsResponse:
    """The permission preset copied onto accounts of ``role``."""
    granted = permissions_for_role(role)
    return RolePermissionsResponse(
        role=role,
        permissions=granted,
        labels=[permission_label(p) for p in granted],
    )


@router.get("/row-actions", response_model=RowActionsResponse)
async def get_row_actions(context: str, target: str) -> RowActionsResponse:
    return RowActionsResponse(context=context, target=target, actions=row_actions(context, target))
