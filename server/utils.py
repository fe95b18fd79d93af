"""Shared utilities for FastAPI routes."""

from collections.abc import Iterable
from typing import Any

from fastapi.responses import JSONResponse

ALLOW_ANY_ORIGIN = "*"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": ALLOW_ANY_ORIGIN,
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def cors_headers(allowed_origins: Iterable[str] = (ALLOW_ANY_ORIGIN,), origin: str | None = None) -> dict[str, str]:
    """
    CORS headers for one response.

    With a wildcard in ``allowed_origins`` every response carries ``*``.
    Otherwise the caller's origin is echoed only when it is allowed, and
    Access-Control-Allow-Origin is omitted for anyone else.
    """
    allowed = tuple(allowed_origins)
    headers = dict(CORS_HEADERS)
    if ALLOW_ANY_ORIGIN in allowed:
        return headers
    if origin and origin in allowed:
        headers["Access-Control-Allow-Origin"] = origin
    else:
        del headers["Access-Control-Allow-Origin"]
    return headers


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


def json_response(
    body: Any, status_code: int = 200, headers: dict[str, str] | None = None
) -> JSONUTF8Response:
    """JSON response carrying CORS headers (permissive unless ``headers`` is given)."""
    return JSONUTF8Response(
        content=body,
        status_code=status_code,
        headers=dict(CORS_HEADERS) if headers is None else headers,
    )


def error_response(
    message: str, status_code: int, headers: dict[str, str] | None = None
) -> JSONUTF8Response:
    return json_response({"ok": False, "error": message}, status_code=status_code, headers=headers)
