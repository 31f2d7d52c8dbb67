"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class UnauthenticatedError(Exception):
    """Raised when an operation requiring a session runs without one.

    This is a control-flow signal (the caller should be sent to the login
    page), not a data error.
    """

    def __init__(self, message: str = "You must be logged in"):
        self.message = message
        super().__init__(message)


class PermissionDeniedError(Exception):
    """Raised when the actor lacks the permission an action requires."""

    def __init__(self, actor_email: str, permission: str):
        self.actor_email = actor_email
        self.permission = permission
        super().__init__(f"'{actor_email}' is missing permission '{permission}'")


class InputValidationError(Exception):
    """Raised when input fails field constraints. Carries one message per field."""

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = field_errors
        details = "; ".join(f"{name}: {msg}" for name, msg in field_errors.items())
        super().__init__(f"Invalid input: {details}")


class DomainPreconditionError(Exception):
    """Raised when a workflow transition is not allowed from the current state."""


class ShipBeforeValidationError(DomainPreconditionError):
    """Raised when shipping an article that has not been validated."""

    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__(f"Article {article_id} must be validated before shipping")


class StorageError(Exception):
    """Raised by repository adapters when the backing store fails."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Storage failure during '{operation}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)
