from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from inventory_tracker.common.response import ErrorResponse
from inventory_tracker.logger_config import logger

MISSING_FIELD_ERRORS = {"missing", "string_too_short"}


def describe_validation_errors(errors) -> str:
    """Collapse pydantic errors into the single message clients display."""
    if any(error.get("type") in MISSING_FIELD_ERRORS for error in errors):
        return "Missing required fields"

    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "Invalid request: " + "; ".join(messages)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Handle HTTP (e.g. 404, 500 raised by the routes)
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return ErrorResponse.send(
            error=exc.detail,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        error = describe_validation_errors(exc.errors())
        logger.warning(f"{request.method} {request.url.path} rejected: {error}")
        return ErrorResponse.send(error=error, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def handle_exception(request: Request, exc: Exception):
        # Log the exception with traceback
        logger.exception("Unhandled exception occurred")

        # Handle all other exceptions (coding, spreadsheet errors, etc.)
        return ErrorResponse.send(
            error=str(exc) or "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
