"""Runtime configuration loader for argflags."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from .coercion import DEFAULT_NUMERIC_MODE, FALSITIES, NUMERIC_MODES

__all__ = [
    "FlagsConfig",
    "get_runtime_config",
    "reload_config",
    "NUMERIC_MODE_ENV",
    "END_OF_OPTIONS_ENV",
    "LOG_LEVEL_ENV",
]

NUMERIC_MODE_ENV = "ARGFLAGS_NUMERIC_MODE"
END_OF_OPTIONS_ENV = "ARGFLAGS_END_OF_OPTIONS"
LOG_LEVEL_ENV = "ARGFLAGS_LOG_LEVEL"

_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True, frozen=True)
class FlagsConfig:
    numeric_mode: str = DEFAULT_NUMERIC_MODE
    end_of_options: bool = True
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FlagsConfig":
        env = os.environ if environ is None else environ

        mode_raw = (env.get(NUMERIC_MODE_ENV) or "").strip().lower()
        if mode_raw and mode_raw not in NUMERIC_MODES:
            _LOGGER.warning(
                "Ignoring %s=%r; expected one of %s",
                NUMERIC_MODE_ENV,
                mode_raw,
                ", ".join(sorted(NUMERIC_MODES)),
            )
            mode_raw = ""
        numeric_mode = mode_raw or DEFAULT_NUMERIC_MODE

        separator_raw = env.get(END_OF_OPTIONS_ENV)
        if separator_raw is None:
            end_of_options = True
        else:
            end_of_options = separator_raw.strip() not in FALSITIES

        level_raw = (env.get(LOG_LEVEL_ENV) or "").strip().upper()
        log_level = level_raw or _DEFAULT_LOG_LEVEL

        return cls(numeric_mode=numeric_mode, end_of_options=end_of_options, log_level=log_level)


@lru_cache(maxsize=1)
def get_runtime_config() -> FlagsConfig:
    """Return the cached runtime configuration."""

    return FlagsConfig.from_env()


def reload_config() -> FlagsConfig:
    """Re-read configuration from the environment, bypassing the cache."""

    get_runtime_config.cache_clear()  # type: ignore[attr-defined]
    return get_runtime_config()


_LOGGER = logging.getLogger("argflags.config")
