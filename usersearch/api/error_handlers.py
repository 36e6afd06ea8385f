"""
Global exception handlers: every failure leaves the server as ``{"Error": reason}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from usersearch.exceptions import APIException
from usersearch.schemas import SearchErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    payload = SearchErrorResponse(error=message)
    return JSONResponse(status_code=status_code, content=payload.model_dump(by_alias=True))


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "SearchServer fatal error"
        )
