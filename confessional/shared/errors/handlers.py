"""
Centralized error handlers for FastAPI.

Maps per-request errors to HTTP responses. Every ConfessionBoardError
goes through a single table keyed by ErrorKind. Storage failures echo
their cause as plain text; anything unexpected never exposes internals.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from confessional.domain.confessions.errors import ConfessionBoardError, ErrorKind
from confessional.shared.security.headers import apply_secure_headers

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500

STORAGE_ERROR_PREFIX = "Database error: "

_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.STORAGE: (HTTP_500, STORAGE_ERROR_PREFIX),
    ErrorKind.NOT_FOUND: (HTTP_404, ""),
}


def to_http(exc: ConfessionBoardError) -> tuple[int, str]:
    """Return the status code and plain-text body for a per-request error."""
    status_code, prefix = _RESPONSES[exc.kind]
    return status_code, f"{prefix}{exc.message}"


def _error_response(status_code: int, error: str, detail=None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = {"error": error}
    if detail:
        body["detail"] = detail
    return apply_secure_headers(
        JSONResponse(status_code=status_code, content=jsonable_encoder(body))
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ConfessionBoardError)
    async def handle_board_error(
        _request: Request, exc: ConfessionBoardError
    ) -> PlainTextResponse:
        """Translate a tagged per-request error into its HTTP response."""
        status_code, body = to_http(exc)
        if exc.kind is ErrorKind.STORAGE:
            logger.error("Storage error: %s", exc.message)
        else:
            logger.warning("Not found: %s", exc.message)
        return apply_secure_headers(PlainTextResponse(body, status_code=status_code))

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed request bodies before any handler runs."""
        logger.warning("Rejected invalid request: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_422, "Invalid request body", exc.errors())

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
