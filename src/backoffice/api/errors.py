"""Maps backoffice error kinds to deterministic view responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from protean.exceptions import ValidationError

from backoffice.api.views import render
from backoffice.shared.errors import InvalidCredentials, NotFound, PersistenceFailure, Unauthenticated
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid email or password"
SIGN_IN_REQUIRED_MESSAGE = "Please sign in to continue"
STORE_UNAVAILABLE_MESSAGE = "The data store is unavailable, please retry"


async def invalid_credentials_handler(request: Request, exc: InvalidCredentials):
    logger.info("Login rejected", form=exc.form, path=request.url.path)
    return render("Login", status_code=401, **{f"{exc.form}_error": INVALID_LOGIN_MESSAGE})


async def unauthenticated_handler(request: Request, exc: Unauthenticated):
    logger.info("Unauthenticated request", audience=exc.audience, path=request.url.path)
    return render("Login", status_code=401, message=SIGN_IN_REQUIRED_MESSAGE)


async def not_found_handler(request: Request, exc: NotFound):
    logger.info("Record not found", kind=exc.kind, record_id=str(exc.identifier))
    return render("NotFound", status_code=404, kind=exc.kind, id=str(exc.identifier), message=str(exc))


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("Validation failed", path=request.url.path, errors=exc.messages)
    return render("Error", status_code=422, errors=exc.messages)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info("Malformed request", path=request.url.path, errors=errors)
    return render("Error", status_code=422, errors=errors)


async def persistence_failure_handler(request: Request, exc: PersistenceFailure):
    logger.error("Persistence failure", path=request.url.path, error=str(exc))
    return render("Error", status_code=503, message=STORE_UNAVAILABLE_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidCredentials, invalid_credentials_handler)
    app.add_exception_handler(Unauthenticated, unauthenticated_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(PersistenceFailure, persistence_failure_handler)
