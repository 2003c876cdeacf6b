"""Translation of application errors to HTTP responses."""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roadready.application.errors import (
    ApplicationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from roadready.infrastructure.config.settings import settings
from roadready.infrastructure.logging.logger import log_event, logger

STATUS_BY_ERROR: dict[type[ApplicationError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(error: ApplicationError) -> int:
    """
    Map an application error to its HTTP status code.

    Args:
        error: Raised application error

    Returns:
        Status code of the nearest mapped error class, 500 if none is mapped
    """
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code = status_for(exc)
    log_event(
        "http",
        level=logging.WARNING,
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        message=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content={"message": exc.message}, headers=headers)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Missing or malformed payloads are client errors (400), not FastAPI's default 422
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    log_event(
        "http",
        level=logging.WARNING,
        method=request.method,
        path=request.url.path,
        status_code=status.HTTP_400_BAD_REQUEST,
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload.", "errors": errors},
    )


async def unhandled_error_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Turn any uncaught exception into a 500 response.

    Installed as HTTP middleware inside CORSMiddleware, so 500 responses carry
    CORS headers like every other response.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        content = {"message": "An unexpected error occurred."}
        if settings.expose_error_details:
            content["details"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """
    Install the error translation layer on an application.

    Call before adding CORSMiddleware so that middleware wraps the 500 responses.
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.middleware("http")(unhandled_error_middleware)
