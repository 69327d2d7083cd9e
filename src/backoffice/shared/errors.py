"""Error kinds raised by the backoffice and mapped to responses by the web layer.

Field and invariant violations use ``protean.exceptions.ValidationError``;
the kinds below cover the outcomes that are not about a single field.
"""

from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError


class BackofficeError(Exception):
    """Base class for backoffice errors."""


class InvalidCredentials(BackofficeError):
    """Email/password pair did not match a stored account."""

    def __init__(self, form: str):
        self.form = form
        super().__init__(f"Invalid {form} credentials")


class Unauthenticated(BackofficeError):
    """No signed-in identity for the audience the route requires."""

    def __init__(self, audience: str):
        self.audience = audience
        super().__init__(f"No signed-in {audience}")


class NotFound(BackofficeError):
    def __init__(self, kind: str, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} {identifier} not found")


class PersistenceFailure(BackofficeError):
    """The data store failed underneath a store operation."""


@contextmanager
def persistence_guard(operation: str):
    """Re-raise SQLAlchemy failures as PersistenceFailure."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceFailure(f"{operation} failed: {exc}") from exc
