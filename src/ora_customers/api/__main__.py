"""
ora_customers.api.__main__

Entrypoint for running the HTTP server via `python -m ora_customers.api`.

Responsibilities:
- Run the shared startup sequence.
- Create the app and serve it with uvicorn in the same event loop.
- Map startup failures to a non-zero exit code.
"""

from __future__ import annotations

import asyncio

import uvicorn

from ora_customers.api.app import create_app
from ora_customers.observability.logging import configure_logging, get_logger
from ora_customers.settings import DEFAULT_SERVICE_NAME
from ora_customers.startup import bootstrap

log = get_logger(__name__)


async def serve() -> int:
    result = await bootstrap()
    if not result.ok:
        return result.exit_code
    settings, gateway = result.settings, result.gateway
    assert settings is not None and gateway is not None

    app = create_app(settings=settings, gateway=gateway)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_config=None,  # structlog
        )
    )
    log.info("listening", host=settings.api_host, port=settings.api_port)
    try:
        await server.serve()
    finally:
        await gateway.dispose()
        log.info("shutdown")
    return 0 if server.started else 1


def main() -> None:
    configure_logging(service_name=DEFAULT_SERVICE_NAME)
    raise SystemExit(asyncio.run(serve()))


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# The engine is created inside the serving loop; async drivers bind their
# connections to the loop that opened them.
