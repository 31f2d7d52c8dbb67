"""Session endpoint: called by the front-end right after login."""

from fastapi import APIRouter, Depends

from backoffice.application import messages
from backoffice.application.schemas import SessionResponse
from backoffice.application.services import UserService
from backoffice.domain.entities import Actor
from backoffice.domain.exceptions import UnauthenticatedError
from backoffice.infrastructure.dependencies import get_actor, get_user_service

router = APIRouter(prefix="/session", tags=["Session"])


@router.post("", response_model=SessionResponse)
async def start_session(
    actor: Actor | None = Depends(get_actor),
    service: UserService = Depends(get_user_service),
) -> SessionResponse:
    """Stamp the connection time and return the caller's profile.

    A signed-in identity without a back-office account gets an empty
    permission list.
    """
    if actor is None:
        raise UnauthenticatedError(messages.NOT_LOGGED_IN)
    user = await service.log_connection(actor)
    if user is None:
        return SessionResponse(email=actor.email, nickname=actor.nickname)
    return SessionResponse(
        email=actor.email,
        nickname=actor.nickname,
        role=user.role.value,
        permissions=list(user.permissions),
    )
