from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    if value not in _LOG_LEVELS:
        raise ValueError(f"Invalid log level for {name}: {value}")
    return value


@dataclass(slots=True)
class CliConfig:
    compact: bool = False
    total_prefix: str = ""
    stdin_sum_prefix: str = ""
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config() -> CliConfig:
    """Build CLI defaults from the environment (and a ``.env`` file, if any)."""
    load_dotenv(find_dotenv(usecwd=True))
    return CliConfig(
        compact=_get_bool("DURCALC_COMPACT"),
        total_prefix=os.getenv("DURCALC_TOTAL_PREFIX", ""),
        stdin_sum_prefix=os.getenv("DURCALC_STDIN_SUM_PREFIX", ""),
        log_level=_get_log_level("DURCALC_LOG_LEVEL", "WARNING"),
    )
