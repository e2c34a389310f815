"""Service Routes - API descriptor and liveness probe.

Invariants:
    - GET / describes the API and its resource endpoints
    - GET /health always returns 200 if the process is up
    - uptime is seconds since this module was imported (process start)
"""

import time

from fastapi import APIRouter, status

from app.core.timestamps import to_iso, utc_now

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"
_started_at = time.monotonic()


@router.get("/", status_code=status.HTTP_200_OK)
async def describe_api():
    """Root descriptor listing the resource endpoints."""
    return {
        "message": "RESTful API with Python + FastAPI",
        "version": API_VERSION,
        "endpoints": {
            "users": "/api/users",
            "products": "/api/products",
        },
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "OK",
        "uptime": uptime_seconds(),
        "timestamp": to_iso(utc_now()),
    }


def uptime_seconds() -> float:
    return round(time.monotonic() - _started_at, 3)
