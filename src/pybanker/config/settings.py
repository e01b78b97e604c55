"""Environment-driven engine settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_DEFAULT_WAGER_ENV = "PYBANKER_DEFAULT_WAGER"
_LOG_LEVEL_ENV = "PYBANKER_LOG_LEVEL"
_MIN_PLAYERS_ENV = "PYBANKER_MIN_PLAYERS"
_MAX_PLAYERS_ENV = "PYBANKER_MAX_PLAYERS"

_DEFAULT_WAGER = 1
_MIN_PLAYERS_DEFAULT = 2
_MAX_PLAYERS_DEFAULT = 10
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class EngineSettings:
    default_wager: int = _DEFAULT_WAGER
    log_level: str = "INFO"
    min_players: int = _MIN_PLAYERS_DEFAULT
    max_players: int = _MAX_PLAYERS_DEFAULT


def load_settings() -> EngineSettings:
    """Read settings from ``PYBANKER_*`` environment variables."""

    min_players = _env_int(_MIN_PLAYERS_ENV, _MIN_PLAYERS_DEFAULT, min_value=2)
    max_players = _env_int(_MAX_PLAYERS_ENV, _MAX_PLAYERS_DEFAULT, min_value=min_players)
    return EngineSettings(
        default_wager=_env_int(_DEFAULT_WAGER_ENV, _DEFAULT_WAGER, min_value=1),
        log_level=_env_level(_LOG_LEVEL_ENV, "INFO"),
        min_players=min_players,
        max_players=max_players,
    )
