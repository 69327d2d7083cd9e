"""View selection — a view name plus the model data its template would receive."""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from backoffice.api.schemas import ViewResponse

DASHBOARD_PATH = "/admin/services"


def render(view: str, status_code: int = 200, **model) -> JSONResponse:
    body = ViewResponse(view=view, model=jsonable_encoder(model))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def redirect(path: str) -> RedirectResponse:
    """See-other redirect, so the browser follows with a GET."""
    return RedirectResponse(url=path, status_code=303)


def redirect_to_dashboard() -> RedirectResponse:
    return redirect(DASHBOARD_PATH)
