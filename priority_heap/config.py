import logging
import os
import warnings
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")
_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def _env_log_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if level not in _LEVELS or not isinstance(logging.getLevelName(level), int):
        warnings.warn(f"Unknown log level {value!r} in {name}, using {default}")
        return default
    return level


@dataclass(frozen=True)
class HeapConfig:
    log_level: str = "INFO"
    check_invariants: bool = False

    @classmethod
    def from_env(cls) -> "HeapConfig":
        return cls(
            log_level=_env_log_level("PRIORITY_HEAP_LOG_LEVEL", cls.log_level),
            check_invariants=_env_flag("PRIORITY_HEAP_CHECK_INVARIANTS"),
        )


config = HeapConfig.from_env()
