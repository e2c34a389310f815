"""Response Envelope - the single terminal renderer for handler results.

Invariants:
    - Success: {success: true, message?, count?, data?}
    - Failure: {success: false, error, status[, stack]} with HTTP status = failure.status
    - stack is present only when settings.is_development
    - Unmatched routes: {success: false, error: "Route not found", path} (404),
      built here but outside the Failure path

Design Decisions:
    - Handlers return Result values; this module matches on them so no handler
      ever formats an error itself
    - Entities serialized through their to_dict(), then walked so a non-finite
      float in any field (including client-supplied names) is written as null
"""

import logging
import math
from typing import Any

from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core.errors import (
    ErrorSeverity, Failure, FailureKind, ROUTE_NOT_FOUND_MESSAGE,
)
from app.core.result import Result, Success

logger = logging.getLogger(__name__)


def render(result: Result, path: str | None = None) -> JSONResponse:
    """Render a handler result as a JSON response."""
    if isinstance(result, Failure):
        return render_failure(result, path)
    return JSONResponse(status_code=result.status, content=success_body(result))


def success_body(success: Success) -> dict:
    body: dict[str, Any] = {"success": True}
    if success.message is not None:
        body["message"] = success.message
    if success.count is not None:
        body["count"] = success.count
    if success.data is not None:
        body["data"] = serialize(success.data)
    return body


def render_failure(failure: Failure, path: str | None = None) -> JSONResponse:
    """Render a failure as the error envelope."""
    if failure.kind.severity is not ErrorSeverity.CRITICAL:
        logger.warning(
            f"{failure.code}: {failure.message}",
            extra={
                "error_code": failure.code,
                "status_code": failure.status,
                "path": path,
            },
        )
    return JSONResponse(
        status_code=failure.status,
        content=failure.to_response(
            include_trace=get_settings().is_development,
        ),
    )


def render_route_not_found(original_url: str) -> JSONResponse:
    """Catch-all 404 for requests no route matches."""
    logger.info(
        f"No route for {original_url}",
        extra={"error_code": FailureKind.ROUTE_NOT_FOUND.value.upper()},
    )
    return JSONResponse(
        status_code=FailureKind.ROUTE_NOT_FOUND.default_status,
        content={
            "success": False,
            "error": ROUTE_NOT_FOUND_MESSAGE,
            "path": original_url,
        },
    )


def serialize(data: Any) -> Any:
    """Entities to their JSON shape; NaN and infinities at any depth become null."""
    if isinstance(data, (list, tuple)):
        return [serialize(item) for item in data]
    if isinstance(data, dict):
        return {key: serialize(value) for key, value in data.items()}
    to_dict = getattr(data, "to_dict", None)
    if callable(to_dict):
        return serialize(to_dict())
    if isinstance(data, float) and not math.isfinite(data):
        return None
    return data
