"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} doesn't exist")


class ValidationError(Exception):
    """Base class for request payloads rejected before reaching storage."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or empty on creation."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class EmptyUpdateError(ValidationError):
    """Raised when an update payload carries none of the updatable fields."""

    def __init__(self, fields: tuple[str, ...]):
        self.fields = fields
        quoted = [f"'{name}'" for name in fields]
        super().__init__(
            f"Request body must contain either {', '.join(quoted[:-1])} or {quoted[-1]}"
        )


class InvalidFieldError(ValidationError):
    """Raised when a supplied field has a value outside its allowed set."""

    def __init__(self, field: str, allowed: list[str]):
        self.field = field
        self.allowed = allowed
        choices = ", ".join(f"'{value}'" for value in allowed)
        super().__init__(f"'{field}' must be one of {choices}")


class StorageError(Exception):
    """Raised when the storage backend fails (connectivity, constraint, driver).

    The original exception is chained as ``__cause__``; the message is never
    exposed to clients.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage operation '{operation}' failed")
