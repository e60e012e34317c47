"""Domain-level exceptions.

Services raise these errors to express business rule violations.
The HTTP layer catches them and maps them to appropriate status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class InfrastructureError(DomainError):
    """The backing store is unreachable or a query failed."""


class DuplicateUsernameError(DuplicateError):
    """A user with this username is already registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username taken. Please pick another!")
