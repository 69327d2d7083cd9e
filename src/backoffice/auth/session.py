"""Session port — the key-value capability the session gate writes identities to.

The gate programs against ``SessionStore``; the web layer hands it a
``RequestSessionStore`` wrapping Starlette's signed-cookie session, tests and
scripts use ``InMemorySessionStore``.
"""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping

USER_EMAIL_KEY = "userEmail"
ADMIN_EMAIL_KEY = "adminEmail"


class SessionStore(ABC):
    """Abstract string-keyed session storage."""

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def clear(self) -> None:
        """Forget every key held for this session."""
        ...


class MappingSessionStore(SessionStore):
    """SessionStore over any mutable mapping."""

    def __init__(self, data: MutableMapping):
        self._data = data

    def get(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) and value else None

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()


class RequestSessionStore(MappingSessionStore):
    """Session of the current HTTP request (requires SessionMiddleware)."""

    def __init__(self, request):
        super().__init__(request.session)


class InMemorySessionStore(MappingSessionStore):
    def __init__(self, **initial):
        super().__init__(dict(initial))
