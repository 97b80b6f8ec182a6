"""
ora_customers.startup

Startup sequence shared by the HTTP server and the demo front-end.

Responsibilities:
- Run config -> connect -> schema in strict order, stopping at the first failure.
- Return an explicit result instead of terminating the process, so callers map
  it to an exit code and tests can drive the startup path in-process.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ora_customers.db.gateway import Gateway
from ora_customers.errors import ConfigError, StartupError
from ora_customers.observability.logging import get_logger, set_level
from ora_customers.settings import Settings, load_settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StartupResult:
    settings: Settings | None = None
    gateway: Gateway | None = None
    error: StartupError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.exit_code


async def bootstrap(load: Callable[[], Settings] = load_settings) -> StartupResult:
    try:
        settings = load()
    except ConfigError as exc:
        return _failed(StartupError("config", str(exc)))
    set_level(settings.log_level)

    try:
        gateway = await Gateway.connect(settings)
    except Exception as exc:
        return _failed(StartupError("connect", f"failed to connect to database: {exc}"))
    log.info("database_connected")

    try:
        version = await gateway.ensure_schema()
    except Exception as exc:
        await gateway.dispose()
        return _failed(StartupError("schema", f"schema migration failed: {exc}"))
    log.info("schema_ready", version=version)

    return StartupResult(settings=settings, gateway=gateway)


def _failed(error: StartupError) -> StartupResult:
    log.error("startup_failed", stage=error.stage, error=error.message)
    return StartupResult(error=error)


# --- Module Notes -----------------------------------------------------------
# No retries: every failure here is fatal and reported once.
