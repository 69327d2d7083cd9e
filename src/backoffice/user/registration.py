"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String

from backoffice.domain import backoffice
from backoffice.user.user import User, find_user_by_email, users
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


@backoffice.command(part_of="User")
class RegisterUser:
    """Create a shopper account. Admins do this from the dashboard."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=72)
    phone: String(max_length=20)


@backoffice.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        if find_user_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email is already registered"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            phone=command.phone,
        )
        users.create(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
