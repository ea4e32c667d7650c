"""
Run configuration.

RunConfig собирается из аргументов командной строки; уровень логирования
может также прийти из переменной окружения QUADC_LOG_LEVEL.
"""

import logging
import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

LOG_LEVEL_ENV_VAR: Final[str] = "QUADC_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_LEVELS: Final[tuple] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    """Параметры одного запуска."""

    points_path: Optional[str] = None
    roots_path: Optional[str] = None
    use_k: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())


def resolve_log_level(
    cli_value: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Уровень логирования: CLI > QUADC_LOG_LEVEL > WARNING."""
    if cli_value:
        return cli_value.upper()

    env = os.environ if environ is None else environ
    value = env.get(LOG_LEVEL_ENV_VAR, "").strip()
    return value.upper() if value else DEFAULT_LOG_LEVEL
