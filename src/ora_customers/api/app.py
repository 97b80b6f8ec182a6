"""
ora_customers.api.app

FastAPI app factory for the customer service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Attach the already-connected gateway and settings to app.state.
- Serve static files from the configured directory.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ora_customers import __version__
from ora_customers.api.cors import PermissiveCORSMiddleware
from ora_customers.api.error_handlers import register_error_handlers
from ora_customers.api.routers.customers import router as customers_router
from ora_customers.api.routers.health import router as health_router
from ora_customers.db.gateway import Gateway
from ora_customers.observability.logging import get_logger
from ora_customers.observability.middleware import RequestContextMiddleware
from ora_customers.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, gateway: Gateway) -> FastAPI:
    # The gateway is connected and migrated by `startup.bootstrap` before we get here;
    # the front-end that called bootstrap disposes it.
    app = FastAPI(
        title="Oracle Customers API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.gateway = gateway

    register_error_handlers(app)
    # Last added runs first: request context wraps CORS.
    app.add_middleware(PermissiveCORSMiddleware)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(customers_router)

    # Mounted last so API routes take precedence.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        log.warning("static_dir_missing", static_dir=str(static_dir))

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; persistence stays
# in the db package.
