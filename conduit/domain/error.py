"""Domain layer errors."""

EMPTY_MSG = "Value can't be empty"
TAKEN_MSG = "Value entered is taken"


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries every failing field at once, keyed by field name, so callers
    can report all problems in a single response.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in errors.items())
        )

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        """Build an error for one field with one message."""
        return cls({field: [message]})


class NotAuthenticatedError(DomainError):
    """Raised when a request carries no usable credential."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, username: str):
        self.resource = resource
        self.resource_id = resource_id
        self.username = username
        super().__init__(
            f"User {username} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
