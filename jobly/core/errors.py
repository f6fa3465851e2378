"""
Domain errors and the handlers that translate them into HTTP responses.

Accessors and dependencies raise these instead of HTTPException so the same
error taxonomy works outside of a request (scripts, tests).
Every error body has the shape {"error": {"message": ..., "status": ...}}.
"""

import logging
from typing import Any
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class JoblyError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Any, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(JoblyError):
    """Malformed input or duplicate key."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Any = "Bad Request"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Lookup key matches no row."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: Any = "Not Found"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: Any = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: Any = "Forbidden"):
        super().__init__(message)


def error_body(message: Any, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.status_code),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid request shape is a 400, listing one message per failed field."""
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))

    logger.info(f"Rejected {request.method} {request.url.path}: {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(messages, status.HTTP_400_BAD_REQUEST),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
