"""Admin account maintenance — add, update and remove."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String

from backoffice.admin.admin import Admin, AdminRole, admins, find_admin_by_email
from backoffice.domain import backoffice
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


@backoffice.command(part_of="Admin")
class AddAdmin:
    """Create an operator account."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=72)
    phone: String(max_length=20)
    role: String(choices=AdminRole)


@backoffice.command(part_of="Admin")
class UpdateAdmin:
    """Change an operator's details. Blank fields keep their current value."""

    admin_id: Identifier(required=True)
    name: String(max_length=100)
    email: String(max_length=254)
    phone: String(max_length=20)
    password: String(max_length=72)
    role: String(choices=AdminRole)


@backoffice.command(part_of="Admin")
class RemoveAdmin:
    admin_id: Identifier(required=True)


def _ensure_email_free(email, admin_id=None):
    holder = find_admin_by_email(email)
    if holder is not None and str(holder.id) != str(admin_id):
        raise ValidationError({"email": ["Email is already registered"]})


@backoffice.command_handler(part_of=Admin)
class ManageAdminHandler:
    @handle(AddAdmin)
    def add_admin(self, command):
        _ensure_email_free(command.email)

        admin = Admin.add(
            name=command.name,
            email=command.email,
            password=command.password,
            phone=command.phone,
            role=command.role,
        )
        admins.create(admin)
        logger.info("Admin added", admin_id=str(admin.id), role=admin.role)
        return str(admin.id)

    @handle(UpdateAdmin)
    def update_admin(self, command):
        if command.email:
            _ensure_email_free(command.email, command.admin_id)

        admins.update(
            command.admin_id,
            name=command.name,
            email=command.email,
            phone=command.phone,
            password=command.password,
            role=command.role,
        )
        logger.info("Admin updated", admin_id=str(command.admin_id))

    @handle(RemoveAdmin)
    def remove_admin(self, command):
        removed = admins.delete(command.admin_id)
        if removed:
            logger.info("Admin removed", admin_id=str(command.admin_id))
        return removed
