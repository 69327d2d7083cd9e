"""Response error extraction for load test observability.

Parses backoffice view responses into human-readable messages.
Every response is a view envelope ``{"view": ..., "model": {...}}``:

- Validation failures (422): model ``errors`` is a list of ``{"loc", "msg", "type"}``
  entries or a ``{"field": ["msg", ...]}`` mapping
- Sign-in failures (401): model carries ``admin_error``, ``user_error`` or ``message``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from a view response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON — return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    model = body.get("model", {}) if isinstance(body, dict) else {}
    errors = model.get("errors")

    if isinstance(errors, list):
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if isinstance(errors, dict):
        return " | ".join(f"{k}: {'; '.join(v) if isinstance(v, list) else v}" for k, v in errors.items())

    for key in ("admin_error", "user_error", "message"):
        if key in model:
            return str(model[key])

    # Unknown shape — stringify and truncate
    return str(body)[:300]
