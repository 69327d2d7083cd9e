"""User aggregate — a shopper who signs in to search products and place orders."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.fields import DateTime, String

from backoffice.domain import backoffice
from backoffice.shared.email import normalize_email, verify_email_address
from backoffice.shared.passwords import hash_password, verify_password
from backoffice.shared.store import RecordStore


@backoffice.aggregate
class User:
    """A shopper account, identified by its email address.

    Only the bcrypt hash of the password is stored. Orders reference a User by
    id; the User itself holds no order data.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)
    registered_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        verify_email_address(self.email)

    @classmethod
    def register(cls, name, email, password, phone=None):
        from backoffice.user.events import UserRegistered

        now = datetime.now()
        user = cls(
            name=name,
            email=normalize_email(email),
            password_hash=hash_password(password),
            phone=phone,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=user.email,
                registered_at=now,
            )
        )
        return user

    def check_password(self, plain) -> bool:
        return verify_password(plain, self.password_hash)

    def update_details(self, name=None, email=None, phone=None, password=None):
        """Apply the non-blank values; blank ones keep the current value."""
        from backoffice.user.events import UserDetailsUpdated

        with atomic_change(self):
            if name:
                self.name = name
            if email:
                self.email = normalize_email(email)
            if phone:
                self.phone = phone
            password_changed = bool(password)
            if password_changed:
                self.password_hash = hash_password(password)

        self.raise_(
            UserDetailsUpdated(
                user_id=self.id,
                name=self.name,
                email=self.email,
                phone=self.phone,
                password_changed=password_changed,
            )
        )


users = RecordStore(User, sort_key=lambda user: (user.email or ""))


def find_user_by_email(email) -> User | None:
    email = normalize_email(email)
    if not email:
        return None
    return users.first(email=email)
