"""Application error taxonomy.

Routes and use cases raise these; the HTTP adapter translates each one to a
status code in a single place (see ``adapters/inbound/http/error_handlers.py``).
"""


class ApplicationError(Exception):
    """Base class for errors with a client-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApplicationError):
    """The request payload is missing, malformed or inconsistent with the path."""


class AuthenticationError(ApplicationError):
    """The caller did not present a valid bearer token."""


class AuthorizationError(ApplicationError):
    """The caller's roles are not in the endpoint's allow-list."""


class NotFoundError(ApplicationError):
    """The requested row (or any row, for listings) does not exist."""


class ConflictError(ApplicationError):
    """The change conflicts with rows already stored."""


class DuplicateResourceError(ConflictError):
    """A row with the same identifier already exists."""


class ResourceInUseError(ConflictError):
    """The row is still referenced by other rows and cannot be deleted."""
