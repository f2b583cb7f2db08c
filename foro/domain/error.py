"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for bad input shape or values before anything touches the store.
    ``field`` carries the dotted path of the offending input when known
    (e.g. ``authors.0.email``).
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)


class InvalidStateError(ValidationError):
    """Raised when a post is not in the state an operation requires."""

    def __init__(self, resource: str, identifier: str, required_state: str):
        self.resource = resource
        self.identifier = identifier
        self.required_state = required_state
        super().__init__(f"{resource} {identifier} is not {required_state}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PersistenceError(DomainError):
    """Raised when the underlying store fails.

    Repository adapters wrap store-specific exceptions so that callers never
    see driver types. The original exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation} post: {cause}")
