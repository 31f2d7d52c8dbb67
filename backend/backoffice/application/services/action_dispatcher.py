"""Action dispatcher: the single entry point editor forms submit to.

Every action goes through the same steps: require a session, look the
action up, check the actor's stored permissions, run the use case, and
turn whatever happened into an ``ActionResult``. Only the missing-session
signal is raised past this boundary.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from backoffice.application import messages
from backoffice.application.interfaces import WriteStatus
from backoffice.application.schemas import (
    ActionResult,
    ArticleCreate,
    ArticleUpdate,
    RecordIdentifier,
    ShipArticleRequest,
    UserCreate,
    UserEmailRequest,
    UserUpdate,
    ValidateArticleRequest,
)
from backoffice.application.services.article_service import ArticleService
from backoffice.application.services.user_service import UserService
from backoffice.domain.entities import Actor
from backoffice.domain.exceptions import (
    DomainPreconditionError,
    DuplicateEntityError,
    EntityNotFoundError,
    InputValidationError,
    PermissionDeniedError,
    StorageError,
    UnauthenticatedError,
)
from backoffice.domain.permissions import has_permission, permission

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any], Actor], Awaitable[ActionResult]]


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__root__"
        if error["type"] == "extra_forbidden":
            errors[name] = f"Le champ '{name}' ne peut pas être modifié"
        else:
            errors.setdefault(name, messages.FIELD_ERRORS.get(name, error["msg"]))
    return errors


def _invalid(field_errors: dict[str, str]) -> ActionResult:
    details = " ; ".join(field_errors.values())
    return ActionResult(success=False, message=f"{messages.INVALID_INPUT} : {details}")


class ActionDispatcher:
    """Routes named actions to the article and user use cases."""

    def __init__(self, articles: ArticleService, users: UserService):
        self._articles = articles
        self._users = users
        self._routes: dict[str, tuple[str, str, Handler]] = {
            "create": ("create", "articles", self._create_article),
            "update": ("update", "articles", self._update_article),
            "delete": ("delete", "articles", self._delete_article),
            "validate": ("validate", "articles", self._validate_article),
            "ship": ("ship", "articles", self._ship_article),
            "create_user": ("create", "user", self._create_user),
            "update_user": ("update", "user", self._update_user),
            "delete_user": ("delete", "user", self._delete_user),
        }

    async def dispatch(
        self, action_name: str, payload: dict[str, Any], actor: Actor | None
    ) -> ActionResult:
        if actor is None:
            raise UnauthenticatedError(messages.NOT_LOGGED_IN)

        route = self._routes.get(action_name)
        if route is None:
            logger.warning("Unrecognized action '%s' from %s", action_name, actor.email)
            return ActionResult(success=False, message=messages.UNRECOGNIZED_ACTION)
        verb, resource, handler = route

        try:
            await self._check_permission(actor, verb, resource)
            return await handler(payload, actor)
        except UnauthenticatedError:
            raise
        except ValidationError as exc:
            return _invalid(_field_errors(exc))
        except InputValidationError as exc:
            return _invalid(exc.field_errors)
        except PermissionDeniedError as exc:
            logger.warning("Denied '%s': %s", action_name, exc)
            return ActionResult(success=False, message=messages.FORBIDDEN)
        except DomainPreconditionError as exc:
            logger.info("Precondition failed for '%s': %s", action_name, exc)
            return ActionResult(success=False, message=messages.ARTICLE_MUST_BE_VALIDATED)
        except DuplicateEntityError as exc:
            message = messages.USER_DUPLICATE if exc.entity_type == "User" else messages.ARTICLE_DUPLICATE_SLUG
            return ActionResult(success=False, message=message)
        except EntityNotFoundError as exc:
            message = messages.USER_NOT_FOUND if exc.entity_type == "User" else messages.ARTICLE_NOT_FOUND
            return ActionResult(success=False, message=message)
        except StorageError:
            logger.exception("Storage failure while running '%s'", action_name)
            return ActionResult(success=False, message=messages.STORAGE_FAILURE)
        except Exception:
            logger.exception("Unexpected failure while running '%s'", action_name)
            return ActionResult(success=False, message=messages.STORAGE_FAILURE)

    async def _check_permission(self, actor: Actor, verb: str, resource: str) -> None:
        required = permission(verb, resource)
        try:
            user = await self._users.get_user(actor.email)
        except EntityNotFoundError:
            raise PermissionDeniedError(actor.email, required) from None
        if not has_permission(user.permissions, verb, resource):
            raise PermissionDeniedError(actor.email, required)

    # ── Articles ─────────────────────────────────────────────────────

    async def _create_article(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        data = ArticleCreate.model_validate(payload)
        outcome = await self._articles.create_article(data, actor)
        if outcome.success:
            return ActionResult(success=True, message=messages.ARTICLE_CREATED)
        if outcome.article_created:
            return ActionResult(success=False, message=messages.ARTICLE_SLUG_NOT_CREATED)
        return ActionResult(success=False, message=messages.ARTICLE_CREATE_FAILED)

    async def _update_article(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        ident = RecordIdentifier.model_validate({"id": payload.get("id")})
        patch = ArticleUpdate.model_validate({k: v for k, v in payload.items() if k != "id"})
        result = await self._articles.update_article(ident.id, patch, actor)
        if result.matched_nothing:
            return ActionResult(success=False, message=messages.ARTICLE_NOT_FOUND)
        if result.ok:
            return ActionResult(success=True, message=messages.ARTICLE_UPDATED)
        return ActionResult(success=False, message=messages.ARTICLE_UPDATE_FAILED)

    async def _delete_article(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        ident = RecordIdentifier.model_validate(payload)
        outcome = await self._articles.delete_article(ident.id, actor)
        if outcome.success:
            return ActionResult(success=True, message=messages.ARTICLE_DELETED)
        if outcome.errored:
            return ActionResult(success=False, message=messages.STORAGE_FAILURE)
        return ActionResult(success=False, message=messages.ARTICLE_DELETE_FAILED)

    async def _validate_article(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        request = ValidateArticleRequest.model_validate(payload)
        outcome = await self._articles.validate_article(request.id, request.validated, actor)
        if outcome.article_missing:
            return ActionResult(success=False, message=messages.ARTICLE_NOT_FOUND)
        if not outcome.success:
            return ActionResult(success=False, message=messages.ARTICLE_VALIDATE_FAILED)
        message = messages.ARTICLE_VALIDATED if request.validated else messages.ARTICLE_INVALIDATED
        if not outcome.slug_synced:
            message = f"{message} ({messages.ARTICLE_SLUG_NOT_SYNCED})"
        return ActionResult(success=True, message=message)

    async def _ship_article(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        request = ShipArticleRequest.model_validate(payload)
        result = await self._articles.ship_article(request.id, request.shipped, actor)
        if result.matched_nothing:
            return ActionResult(success=False, message=messages.ARTICLE_NOT_FOUND)
        if not result.ok:
            return ActionResult(success=False, message=messages.ARTICLE_SHIP_FAILED)
        message = messages.ARTICLE_SHIPPED if request.shipped else messages.ARTICLE_UNSHIPPED
        return ActionResult(success=True, message=message)

    # ── Users ────────────────────────────────────────────────────────

    async def _create_user(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        data = UserCreate.model_validate(payload)
        result = await self._users.create_user(data, actor)
        if result.ok:
            return ActionResult(success=True, message=messages.USER_CREATED)
        return ActionResult(success=False, message=messages.USER_CREATE_FAILED)

    async def _update_user(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        ident = RecordIdentifier.model_validate({"id": payload.get("id")})
        data = UserUpdate.model_validate({k: v for k, v in payload.items() if k != "id"})
        result = await self._users.update_user(ident.id, data, actor)
        if result.matched_nothing:
            return ActionResult(success=False, message=messages.USER_NOT_FOUND)
        if result.ok:
            return ActionResult(success=True, message=messages.USER_UPDATED)
        return ActionResult(success=False, message=messages.USER_UPDATE_FAILED)

    async def _delete_user(self, payload: dict[str, Any], actor: Actor) -> ActionResult:
        request = UserEmailRequest.model_validate(payload)
        result = await self._users.delete_user(request.email, actor)
        if result.status == WriteStatus.OK:
            return ActionResult(success=True, message=messages.USER_DELETED)
        return ActionResult(success=False, message=messages.USER_DELETE_FAILED)
