"""Error Handlers - global exception handlers feeding the envelope renderer.

Invariants:
    - StarletteHTTPException 404/405 -> "Route not found" with the original URL
    - RequestValidationError (malformed body) -> validation failure, 400
    - Exception (catch-all) -> internal failure, never leaks the exception message
    - Crashes inside routes are rendered by UnhandledErrorMiddleware (innermost),
      so they still pass through security headers, CORS and the access log

Design Decisions:
    - Three-layer handler: routing (HTTPException), parsing (Pydantic), catch-all (Exception)
    - Every layer converts to a Failure and calls api.envelope, so framework
      errors and handler failures share one response shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.envelope import render_failure, render_route_not_found
from app.core.errors import Failure, FailureKind, internal_error, validation_error

logger = logging.getLogger(__name__)

_UNMATCHED_ROUTE_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def original_url(request: Request) -> str:
    """Path plus query string, byte for byte as the client sent them."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def render_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log a crash with its traceback and render the internal-error envelope."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return render_failure(internal_error(exc), request.url.path)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unmatched method+path renders the catch-all 404."""
        if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
            return render_route_not_found(original_url(request))
        kind = (
            FailureKind.INTERNAL if exc.status_code >= 500
            else FailureKind.VALIDATION
        )
        return render_failure(
            Failure(kind, str(exc.detail), exc.status_code), request.url.path,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed JSON or a non-object body."""
        return render_failure(
            validation_error(describe_validation_errors(exc.errors())),
            request.url.path,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Errors raised outside the middleware stack (middleware itself)."""
        return render_unexpected_error(request, exc)


def describe_validation_errors(errors) -> str:
    """One-line summary of the first parsing error."""
    if not errors:
        return "Invalid request body"
    first = errors[0]
    message = first.get("msg", "Invalid request body")
    detail = (first.get("ctx") or {}).get("error")
    if detail:
        return f"Invalid request body: {message} ({detail})"
    return f"Invalid request body: {message}"
