"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from backoffice.domain import backoffice


@backoffice.event(part_of="User")
class UserRegistered:
    """A new shopper account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@backoffice.event(part_of="User")
class UserDetailsUpdated:
    """A shopper's name, email, phone or password was changed by an admin."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    phone: String()
    password_changed: Boolean(default=False)
