"""Domain events for the Admin aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from backoffice.domain import backoffice


@backoffice.event(part_of="Admin")
class AdminAdded:
    """A new operator account was created."""

    __version__ = 1

    admin_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    role: String(required=True)
    created_at: DateTime(required=True)


@backoffice.event(part_of="Admin")
class AdminDetailsUpdated:
    __version__ = 1

    admin_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    phone: String()
    role: String(required=True)
    password_changed: Boolean(default=False)
