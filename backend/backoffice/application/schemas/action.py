"""Pydantic DTOs for the action dispatcher envelope."""

from pydantic import BaseModel


class ActionResult(BaseModel):
    """Uniform outcome of every dispatched action."""

    success: bool
    message: str


class SessionResponse(BaseModel):
    email: str
    nickname: str
    role: str | None = None
    permissions: list[str] = []
