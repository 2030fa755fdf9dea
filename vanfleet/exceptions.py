# vanfleet/exceptions.py
"""
Application error taxonomy and the FastAPI handlers that render it.
Every error response has the same body: {"error_code", "message", "details"}.
"""

from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from vanfleet.utils.logger import get_logger

logger = get_logger(__name__)


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AppException):
    """Raised when no entity exists for the given key."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} not found"
        super().__init__(
            message=message,
            error_code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id},
        )


class ConflictError(AppException):
    """Raised when a natural key (VIN, MATRICULA) is already taken."""

    def __init__(self, message: str = "VIN or MATRICULA already exists"):
        super().__init__(message=message, error_code="conflict", status_code=status.HTTP_409_CONFLICT)


class UnauthorizedError(AppException):
    """Raised for a wrong password or a missing / invalid session."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message, error_code="unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)


class StoreUnavailableError(AppException):
    """Raised when the database cannot be reached."""

    def __init__(self, message: str = "Database not available"):
        super().__init__(message=message, error_code="unavailable", status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


class InternalError(AppException):
    """Raised for store failures that have no more specific kind."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message, error_code="internal", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# ── Handlers ─────────────────────────────────────────────────────────────────

def _error_response(status_code: int, error_code: str, message: str, details: Dict[str, Any] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details or {}},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return _error_response(exc.status_code, exc.error_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    error_code_map = {
        400: "bad_request",
        401: "unauthorized",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        503: "unavailable",
    }
    return _error_response(exc.status_code, error_code_map.get(exc.status_code, "internal"), str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_failed",
        "Validation error",
        {"errors": jsonable_encoder(exc.errors())},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal", "Internal server error")


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
