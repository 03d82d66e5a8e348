"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailure(Exception):
    """Raised when a mutation payload carries a value that cannot be accepted.

    ``field`` names the offending field (dotted path for nested payloads),
    e.g. ``amount`` when a form submitted ``"abc"`` as a transaction amount.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid value for '{field}': {message}")


class UnauthorizedError(Exception):
    """Raised when a mutation is attempted without a valid edit capability."""

    def __init__(self, reason: str = "A valid edit capability is required"):
        self.reason = reason
        super().__init__(reason)


class MalformedPersistedStateError(Exception):
    """Raised when a persisted blob exists but cannot be decoded."""

    def __init__(self, key: str, detail: str):
        self.key = key
        self.detail = detail
        super().__init__(f"Persisted state '{key}' is malformed: {detail}")
