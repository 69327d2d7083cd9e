"""Session gate — credential checks and the identity bound to a session."""

from backoffice.admin.admin import Admin, find_admin_by_email
from backoffice.auth.session import ADMIN_EMAIL_KEY, USER_EMAIL_KEY, SessionStore
from backoffice.user.user import User, find_user_by_email
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


class SessionGate:
    """Authenticates users and admins and resolves who a session belongs to.

    A successful sign-in stores the account's email under a single session key;
    every later lookup goes back to the credential store with that email, so a
    deleted account stops resolving immediately.
    """

    def authenticate_user(self, email, password) -> bool:
        user = find_user_by_email(email)
        matched = user is not None and user.check_password(password)
        logger.info("User authentication", email=email, matched=matched)
        return matched

    def authenticate_admin(self, email, password) -> bool:
        admin = find_admin_by_email(email)
        matched = admin is not None and admin.check_password(password)
        logger.info("Admin authentication", email=email, matched=matched)
        return matched

    def sign_in_user(self, session: SessionStore, email) -> None:
        user = find_user_by_email(email)
        session.set(USER_EMAIL_KEY, user.email)

    def sign_in_admin(self, session: SessionStore, email) -> None:
        admin = find_admin_by_email(email)
        session.set(ADMIN_EMAIL_KEY, admin.email)

    def current_user(self, session: SessionStore | None) -> User | None:
        if session is None:
            return None
        return find_user_by_email(session.get(USER_EMAIL_KEY))

    def current_admin(self, session: SessionStore | None) -> Admin | None:
        if session is None:
            return None
        return find_admin_by_email(session.get(ADMIN_EMAIL_KEY))

    def sign_out(self, session: SessionStore) -> None:
        session.clear()


gate = SessionGate()
