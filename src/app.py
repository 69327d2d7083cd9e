"""Backoffice FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from backoffice/domain.toml:
#   - "test"       → in-memory stores
#   - "production" → SQLite (run `python src/manage.py setup-db` first)
from backoffice.domain import backoffice

backoffice.init()

from backoffice.api.application import create_app  # noqa: E402

app = create_app()
