"""
HTTP error taxonomy and FastAPI exception handlers.

Mapping:
- AppError subclasses          → their own status code
- RequestValidationError       → 400 ValidationError with per-field details
- DomainValidationError        → 422
- Starlette HTTPException      → its status code (unknown routes, bad methods)
- anything else                → 500, details hidden from the client
"""

from http import HTTPStatus
from logging import getLogger
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.presentation.responses import ErrorBody, ErrorResponse, FieldErrorBody

logger = getLogger(__name__)

# Location prefixes FastAPI puts in front of the offending field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__


class BadRequestError(AppError):
    status_code = 400
    default_message = "Bad request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class UnprocessableEntityError(AppError):
    status_code = 422
    default_message = "Unprocessable entity"


class InternalServerError(AppError):
    status_code = 500
    default_message = "Internal server error"


def error_response(
    status_code: int,
    name: str,
    message: str,
    details: Optional[list[FieldErrorBody]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorBody(code=status_code, name=name, message=message, details=details)
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _status_name(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTPError"
    return phrase.title().replace(" ", "").replace("-", "") + "Error"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.warning(f"[{exc.name}] {exc.message}")
        return error_response(exc.status_code, exc.name, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        details = [
            FieldErrorBody(field=_field_name(err.get("loc", ())), message=err["msg"])
            for err in exc.errors()
        ]
        logger.info(f"[ValidationError] {request.method} {request.url.path}: {details}")
        return error_response(400, "ValidationError", "Invalid request", details)

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        error = UnprocessableEntityError(exc.message)
        logger.warning(f"[{error.name}] {error.message}")
        return error_response(error.status_code, error.name, error.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(
            exc.status_code, _status_name(exc.status_code), str(exc.detail)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error = InternalServerError("Something went wrong")
        logger.exception(f"[{error.name}] {type(exc).__name__}: {exc}")
        return error_response(error.status_code, error.name, error.message)
