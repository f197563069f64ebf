import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


# --- Configuration ---
@dataclass(frozen=True)
class SigConfig:
    """Configuration settings for sig."""
    DISABLED: bool = False
    LOG_LEVEL: int = logging.WARNING
    LOG_FORMAT: str = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SigConfig":
        """
Reads ``SIG_DISABLE`` and ``SIG_LOG_LEVEL`` from ``environ`` (the
process environment by default). Unset variables keep the defaults.
        """
        environ = os.environ if environ is None else environ
        disabled = disabled_from_env(environ)
        level = _parse_level(environ.get("SIG_LOG_LEVEL"), cls.LOG_LEVEL)
        return cls(DISABLED=disabled, LOG_LEVEL=level)


def disabled_from_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Reads only ``SIG_DISABLE``; used at import time."""
    environ = os.environ if environ is None else environ
    return environ.get("SIG_DISABLE", "").strip().lower() in _TRUTHY


def _parse_level(raw: Optional[str], default: int) -> int:
    if raw is None or not raw.strip():
        return default
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {raw!r} in SIG_LOG_LEVEL")
    return level


# --- Logging Setup ---
def setup_logging(level: int, log_format: str):
    """Configures basic logging."""
    logging.basicConfig(level=level, format=log_format)
