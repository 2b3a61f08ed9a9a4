# riyadah/core/errors.py
"""
Domain error taxonomy and the FastAPI handlers that render it.

Every error leaves the API as ``{"error": "<message>"}`` with a status code
matching its kind. Business-rule and validation errors are raised on purpose
by the services and shown to the caller verbatim; anything else is logged and
reported as a generic 500 so internal details never reach the client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("uvicorn.error")


class AppError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


# ----- 400: bad input and business rules -----
class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Resource already exists"


class UnsupportedOperation(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Operation not supported for this role"


class InsufficientPoints(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Insufficient points"


class OutOfStock(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Reward out of stock"


class RegistrationClosed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Tournament registration is closed"


class AlreadyRegistered(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Already registered for this tournament"


# ----- 401: identity -----
class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class ExpiredToken(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token expired"


# ----- 403 / 404 / 500 -----
class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Insufficient permissions"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalError(AppError):
    pass


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    first = errors[0]
    location = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "path", "query"))
    msg = first.get("msg", ValidationError.message)
    return f"{location}: {msg}" if location else msg


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""

    @app.exception_handler(AppError)
    async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error("[errors] internal error: %s", exc.message)
            return JSONResponse(status_code=exc.status_code, content={"error": InternalError.message})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _first_validation_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Catch-all: log with traceback, never leak details to the client
        logger.error(
            "[errors] unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": InternalError.message},
        )
