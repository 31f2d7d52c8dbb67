"""Pydantic DTOs for back-office accounts."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from backoffice.domain.entities import UserRole
from backoffice.domain.permissions import is_known_permission


class UserCreate(BaseModel):
    """Schema for creating an account. Permissions come from the role preset."""

    email: EmailStr
    tiers_service_ident: str = Field(..., min_length=1, examples=["auth0|64f1c2"])
    role: UserRole = UserRole.CONTRIBUTOR

    model_config = {"str_strip_whitespace": True}


class UserUpdate(BaseModel):
    """Schema for editing an account: all fields optional.

    When ``permissions`` is omitted and ``role`` changes, the new role's
    preset is copied onto the account.
    """

    tiers_service_ident: str | None = Field(None, min_length=1)
    role: UserRole | None = None
    permissions: list[str] | None = None

    model_config = {"str_strip_whitespace": True, "extra": "forbid"}

    @field_validator("permissions")
    @classmethod
    def _known_permissions_only(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        unknown = [p for p in value if not is_known_permission(p)]
        if unknown:
            raise ValueError(f"unknown permissions: {', '.join(unknown)}")
        return value


class UserResponse(BaseModel):
    id: int
    email: str
    tiers_service_ident: str
    role: UserRole
    permissions: list[str]
    created_at: datetime
    last_connection_at: datetime | None
    updated_at: datetime | None
    updated_by: str | None

    model_config = {"from_attributes": True}


class RolePermissionsResponse(BaseModel):
    role: UserRole
    permissions: list[str]
    labels: list[str]


class UserEmailRequest(BaseModel):
    email: EmailStr
