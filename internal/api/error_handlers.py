"""
Global exception handlers.

- CleanTasksError -> its own status code with the standard envelope
- Exception (catch-all) -> 500, never leaks internal details
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.exceptions import CleanTasksError
from core.logger import format_exception_short, logger


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(CleanTasksError)
    async def clean_tasks_error_handler(request: Request, exc: CleanTasksError):
        logger.warning(
            f"API: {exc.code} on {request.method} {request.url.path}: {exc.message}"
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            format_exception_short(
                exc, f"API: Unhandled error on {request.method} {request.url.path}"
            )
        )
        logger.exception("Unhandled error details:")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=CleanTasksError("Internal server error").to_response(),
        )
