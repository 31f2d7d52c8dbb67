"""Action endpoint: every editor form posts here."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from backoffice.application.schemas import ActionResult
from backoffice.application.services import ActionDispatcher
from backoffice.domain.entities import Actor
from backoffice.infrastructure.dependencies import get_action_dispatcher, get_actor

router = APIRouter(prefix="/actions", tags=["Actions"])


@router.post("/{action_name}", response_model=ActionResult)
async def run_action(
    action_name: str,
    payload: dict[str, Any] = Body(default={}),
    actor: Actor | None = Depends(get_actor),
    dispatcher: ActionDispatcher = Depends(get_action_dispatcher),
) -> ActionResult:
    """Dispatch ``action_name`` with the submitted form as payload.

    Failures come back as ``success: false`` with a 200 status; only a
    missing session turns into a 401.
    """
    return await dispatcher.dispatch(action_name, payload, actor)
