"""
ora_customers.errors

Startup error types.

Responsibilities:
- Distinguish configuration failures from other fatal startup failures.
- Map each startup stage onto a process exit code.
"""

from __future__ import annotations

from typing import Literal

StartupStage = Literal["config", "connect", "schema"]

# Exit codes are part of the CLI contract; keep them stable.
EXIT_CODES: dict[str, int] = {
    "config": 2,
    "connect": 3,
    "schema": 4,
}


class ConfigError(Exception):
    """Required configuration is missing or empty."""


class StartupError(Exception):
    def __init__(self, stage: StartupStage, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.message = message

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.stage]
