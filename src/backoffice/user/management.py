"""User maintenance from the admin dashboard — update and remove."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String

from backoffice.domain import backoffice
from backoffice.user.user import User, find_user_by_email, users
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


@backoffice.command(part_of="User")
class UpdateUser:
    """Change a shopper's details. Blank fields keep their current value."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    email: String(max_length=254)
    phone: String(max_length=20)
    password: String(max_length=72)


@backoffice.command(part_of="User")
class RemoveUser:
    user_id: Identifier(required=True)


@backoffice.command_handler(part_of=User)
class ManageUserHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        if command.email:
            holder = find_user_by_email(command.email)
            if holder is not None and str(holder.id) != str(command.user_id):
                raise ValidationError({"email": ["Email is already registered"]})

        users.update(
            command.user_id,
            name=command.name,
            email=command.email,
            phone=command.phone,
            password=command.password,
        )
        logger.info("User updated", user_id=str(command.user_id))

    @handle(RemoveUser)
    def remove_user(self, command):
        removed = users.delete(command.user_id)
        if removed:
            logger.info("User removed", user_id=str(command.user_id))
        return removed
