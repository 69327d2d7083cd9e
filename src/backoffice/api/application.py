"""FastAPI application factory for the backoffice.

The domain must be initialized (``backoffice.init()``) before the app serves
requests; ``src/app.py`` does that for uvicorn, the test suite does it in
``conftest.py``.
"""

import os

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from backoffice.api.errors import register_error_handlers
from backoffice.api.routes import admin_router, auth_router, storefront_router
from backoffice.api.schemas import HealthResponse
from backoffice.domain import backoffice
from backoffice.utils.logging import add_context, clear_context

SESSION_COOKIE = "backoffice_session"
DEFAULT_SESSION_MAX_AGE = 8 * 60 * 60


def session_settings() -> dict:
    """Session cookie settings, read from the environment."""
    return {
        "secret_key": os.environ.get("SESSION_SECRET", "dev-only-session-secret"),
        "session_cookie": SESSION_COOKIE,
        "max_age": int(os.environ.get("SESSION_MAX_AGE", DEFAULT_SESSION_MAX_AGE)),
        "same_site": "lax",
        "https_only": os.environ.get("PROTEAN_ENV") == "production",
    }


def create_app() -> FastAPI:
    app = FastAPI(
        title="Backoffice",
        description="E-commerce back office — sign-in, product search, ordering and admin CRUD",
    )

    app.add_middleware(SessionMiddleware, **session_settings())

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the backoffice domain context for each request."""
        add_context(path=request.url.path, method=request.method)
        try:
            with backoffice.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(storefront_router)
    app.include_router(admin_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(domain=backoffice.name)

    return app
