"""Error taxonomy for the employee directory and its HTTP rendering."""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for every failure that maps to a stable API outcome."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    error_code: str = "internal_error"
    message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class UnauthenticatedError(APIError):
    """Missing, unparseable or expired credential, or an unknown role claim."""

    status_code: int = HTTPStatus.UNAUTHORIZED
    error_code: str = "unauthenticated"
    message: str = "Invalid authentication credentials"


class ForbiddenError(APIError):
    """The caller's rank is too low for the requested operation."""

    status_code: int = HTTPStatus.FORBIDDEN
    error_code: str = "forbidden"
    message: str = "You cannot create or modify an employee with a higher role than yours."


class ValidationFailedError(APIError):
    status_code: int = HTTPStatus.BAD_REQUEST
    error_code: str = "validation_failed"
    message: str = "Request validation failed"


class NotFoundError(APIError):
    status_code: int = HTTPStatus.NOT_FOUND
    error_code: str = "not_found"
    message: str = "Employee not found"


class ConflictError(APIError):
    """Optimistic-concurrency violation; the client should reload and retry."""

    status_code: int = HTTPStatus.CONFLICT
    error_code: str = "conflict"
    message: str = "The employee was modified or deleted by another process. Reload and try again."


class InternalFailureError(APIError):
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    error_code: str = "internal_error"
    message: str = "An unexpected error occurred. Try again later."


def _render(status_code: int, message: str, error_code: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=int(status_code),
        content={"detail": message, "code": error_code},
        headers=headers,
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    headers = None
    if isinstance(exc, (ForbiddenError, ConflictError)):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return _render(exc.status_code, exc.message, exc.error_code, headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    fallback = InternalFailureError()
    return _render(fallback.status_code, fallback.message, fallback.error_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
