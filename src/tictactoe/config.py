"""Startup configuration read once from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping
import os


@dataclass(frozen=True)
class AppConfig:
    app_name: str = "Tic Tac Toe"
    version: str = "0.1.0"
    environment: str = "development"
    ai_delay: float = 0.4
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def load_config(environ: Mapping[str, str] = os.environ) -> AppConfig:
    """Build an ``AppConfig`` from ``TICTACTOE_*`` variables, falling back to defaults."""

    defaults = AppConfig()
    ai_delay = float(environ.get("TICTACTOE_AI_DELAY") or defaults.ai_delay)
    if ai_delay < 0:
        raise ValueError(f"TICTACTOE_AI_DELAY must not be negative, got {ai_delay}")
    return AppConfig(
        app_name=environ.get("TICTACTOE_APP_NAME") or defaults.app_name,
        version=environ.get("TICTACTOE_VERSION") or defaults.version,
        environment=environ.get("TICTACTOE_ENV") or defaults.environment,
        ai_delay=ai_delay,
        host=environ.get("TICTACTOE_HOST") or defaults.host,
        port=int(environ.get("TICTACTOE_PORT") or defaults.port),
        log_level=(environ.get("TICTACTOE_LOG_LEVEL") or defaults.log_level).upper(),
    )
