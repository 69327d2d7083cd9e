"""Request-scoped dependencies: the session store and the signed-in identities."""

from typing import Annotated

from fastapi import Depends, Request

from backoffice.admin.admin import Admin
from backoffice.auth.gate import gate
from backoffice.auth.session import RequestSessionStore, SessionStore
from backoffice.shared.errors import Unauthenticated
from backoffice.user.user import User


async def session_store(request: Request) -> SessionStore:
    return RequestSessionStore(request)


Session = Annotated[SessionStore, Depends(session_store)]


async def require_user(session: Session) -> User:
    user = gate.current_user(session)
    if user is None:
        raise Unauthenticated("user")
    return user


async def require_admin(session: Session) -> Admin:
    admin = gate.current_admin(session)
    if admin is None:
        raise Unauthenticated("admin")
    return admin


CurrentUser = Annotated[User, Depends(require_user)]
CurrentAdmin = Annotated[Admin, Depends(require_admin)]
