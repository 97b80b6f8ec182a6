"""
ora_customers.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Read Oracle connection parameters from `ORA_*` environment variables.
- Fail fast with a descriptive error when a required value is missing or empty.
- Hide secrets from repr/logging.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ora_customers.errors import ConfigError

ENV_PREFIX = "ORA_"
DEFAULT_SERVICE_NAME = "ora-customers"


class Settings(BaseSettings):
    """
    Required: user, password, connect_string.
    Everything else has a default suitable for local runs.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, case_sensitive=False)

    # Oracle connection (no defaults for required values)
    user: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    connect_string: str = Field(min_length=1)
    # Instant Client directory, e.g. /opt/oracle/instantclient_23_5
    lib_dir: str | None = None

    # Overrides the Oracle descriptor entirely, e.g. "sqlite+aiosqlite:///./local.db".
    database_url: str | None = Field(default=None, repr=False)

    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    static_dir: str = "web"

    @field_validator("lib_dir", "database_url", mode="before")
    @classmethod
    def _empty_as_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def load_settings() -> Settings:
    """
    Build settings from the environment, converting validation failures into a
    `ConfigError` that names each offending environment variable.
    """

    try:
        return Settings()
    except ValidationError as exc:
        problems = []
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "?"
            var = f"{ENV_PREFIX}{field.upper()}"
            if err["type"] == "missing":
                problems.append(f"environment variable {var} is required")
            else:
                problems.append(f"environment variable {var} is invalid: {err['msg']}")
        raise ConfigError("; ".join(problems)) from exc


# --- Module Notes -----------------------------------------------------------
# Settings are loaded exactly once by `startup.bootstrap` and then carried on
# `app.state`; nothing else reads the environment.
