"""
ora_customers.api.error_handlers

Exception handlers that render every per-request failure as `{"error": string}`.

Responsibilities:
- HTTPException (raised by handlers, routing and static files) -> its status code.
- RequestValidationError (malformed JSON, missing/empty fields) -> 400.
- Anything else -> 500 with a fixed message; details go to the log only.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from ora_customers.observability.logging import get_logger

log = get_logger(__name__)


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return "invalid JSON body"
    parts = []
    for e in errors:
        loc = ".".join(str(p) for p in e.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {e['msg']}" if loc else str(e["msg"]))
    return "; ".join(parts) or "invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = describe_validation_error(exc)
        log.info("request_rejected", error=message)
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content=error_body(message))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        log.exception("unhandled_error", error_type=type(exc).__name__)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("internal server error"),
        )
