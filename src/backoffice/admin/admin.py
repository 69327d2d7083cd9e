"""Admin aggregate — back-office operators who manage users, products and admins."""

from datetime import datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.fields import DateTime, String

from backoffice.domain import backoffice
from backoffice.shared.email import normalize_email, verify_email_address
from backoffice.shared.passwords import hash_password, verify_password
from backoffice.shared.store import RecordStore


class AdminRole(Enum):
    """Role marker carried by every admin account."""

    ADMIN = "Admin"
    OWNER = "Owner"


@backoffice.aggregate
class Admin:
    """An operator account allowed onto the dashboard.

    Admins sign in with email and password; the password is kept only as a
    bcrypt hash.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)
    role: String(choices=AdminRole, default=AdminRole.ADMIN.value)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        verify_email_address(self.email)

    @classmethod
    def add(cls, name, email, password, phone=None, role=None):
        from backoffice.admin.events import AdminAdded

        now = datetime.now()
        admin = cls(
            name=name,
            email=normalize_email(email),
            password_hash=hash_password(password),
            phone=phone,
            role=role or AdminRole.ADMIN.value,
            created_at=now,
        )
        admin.raise_(
            AdminAdded(
                admin_id=admin.id,
                name=admin.name,
                email=admin.email,
                role=admin.role,
                created_at=now,
            )
        )
        return admin

    def check_password(self, plain) -> bool:
        return verify_password(plain, self.password_hash)

    def update_details(self, name=None, email=None, phone=None, password=None, role=None):
        """Apply the non-blank values; blank ones keep the current value."""
        from backoffice.admin.events import AdminDetailsUpdated

        with atomic_change(self):
            if name:
                self.name = name
            if email:
                self.email = normalize_email(email)
            if phone:
                self.phone = phone
            if role:
                self.role = role
            password_changed = bool(password)
            if password_changed:
                self.password_hash = hash_password(password)

        self.raise_(
            AdminDetailsUpdated(
                admin_id=self.id,
                name=self.name,
                email=self.email,
                phone=self.phone,
                role=self.role,
                password_changed=password_changed,
            )
        )


admins = RecordStore(Admin, sort_key=lambda admin: (admin.email or ""))


def find_admin_by_email(email) -> Admin | None:
    email = normalize_email(email)
    if not email:
        return None
    return admins.first(email=email)
