"""
errors.py — Journey error taxonomy and FastAPI exception handlers.

Managers raise the domain errors below; the handlers registered by
`register_exception_handlers` turn them into a consistent JSON body:

    {"error": {"code": "VALIDATION_ERROR", "message": "mood rating must be between 1 and 5"}}
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DATABASE_ERROR = "DATABASE_ERROR"


class JourneyError(Exception):
    """Base class for errors surfaced to API callers."""

    code = ErrorCode.DATABASE_ERROR
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JourneyError):
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class NotFoundError(JourneyError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class ConflictError(JourneyError):
    code = ErrorCode.CONFLICT
    status_code = 409


class PersistenceError(JourneyError):
    code = ErrorCode.DATABASE_ERROR
    status_code = 500


def error_response(code: ErrorCode, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code.value, "message": message}},
    )


async def journey_error_handler(request: Request, exc: JourneyError) -> JSONResponse:
    if isinstance(exc, PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        # Store details stay in the logs
        return error_response(exc.code, "internal server error", exc.status_code)
    return error_response(exc.code, exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
    return error_response(ErrorCode.VALIDATION_ERROR, message, 400)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(JourneyError, journey_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
