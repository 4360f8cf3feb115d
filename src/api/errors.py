"""
Application-wide exception handlers.

Request bodies that fail schema validation (wrong types, unparseable
dates, non-JSON payloads) get the same 400 body shape as domain
validation errors instead of FastAPI's default 422.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())[1:])
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(
        message="Validation error",
        errors=[_format_error(error) for error in exc.errors()],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the shared exception handlers to an application."""
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
