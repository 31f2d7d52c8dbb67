"""Domain entities for back-office accounts and authenticated actors."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    """Roles an editor account can hold."""

    ADMIN = "admin"
    CONTRIBUTOR = "contributor"


@dataclass
class User:
    """A back-office account.

    ``permissions`` is the concrete grant list copied from the role preset
    when the account is created or its role changes. It is stored as data
    and never recomputed at read time.
    """

    email: str
    tiers_service_ident: str
    role: UserRole
    permissions: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_connection_at: datetime | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None


@dataclass(frozen=True)
class Actor:
    """The authenticated identity performing an operation."""

    email: str
    nickname: str
