"""Backoffice HTTP API package."""

from backoffice.api.routes import admin_router, auth_router, storefront_router

__all__ = ["admin_router", "auth_router", "storefront_router"]
