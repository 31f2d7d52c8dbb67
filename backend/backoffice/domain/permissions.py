"""Role → permission presets and the containment check used to gate actions.

Permission strings have the shape ``"<verb>:<resource>"``. Role presets are
fixed lists; changing what a role grants means editing the list here.
"""

from backoffice.domain.entities import UserRole

VERBS = ("read", "create", "update", "delete", "validate", "ship", "enable")
RESOURCES = ("articles", "user", "maintenance")

ADMIN_PERMISSIONS: tuple[str, ...] = (
    "read:articles",
    "create:articles",
    "update:articles",
    "delete:articles",
    "validate:articles",
    "ship:articles",
    "create:user",
    "update:user",
    "delete:user",
    "enable:maintenance",
)

CONTRIBUTOR_PERMISSIONS: tuple[str, ...] = (
    "read:articles",
    "create:articles",
    "update:articles",
    "validate:articles",
)

_ROLE_PRESETS: dict[UserRole, tuple[str, ...]] = {
    UserRole.ADMIN: ADMIN_PERMISSIONS,
    UserRole.CONTRIBUTOR: CONTRIBUTOR_PERMISSIONS,
}


def permission(verb: str, resource: str) -> str:
    """Build a permission string, rejecting unknown verbs or resources."""
    if verb not in VERBS:
        raise ValueError(f"Unknown permission verb '{verb}'")
    if resource not in RESOURCES:
        raise ValueError(f"Unknown permission resource '{resource}'")
    return f"{verb}:{resource}"


def permissions_for_role(role: UserRole | str) -> list[str]:
    """Return a fresh copy of the preset granted to ``role``."""
    return list(_ROLE_PRESETS[UserRole(role)])


def has_permission(granted: list[str] | tuple[str, ...], verb: str, resource: str) -> bool:
    return f"{verb}:{resource}" in granted


def is_known_permission(value: str) -> bool:
    return value in ADMIN_PERMISSIONS


def permission_label(value: str) -> str:
    """Display form used in the role listing: ``create:articles`` → ``create/articles``."""
    return value.replace(":", "/")
