import os
import logging
from dataclasses import dataclass
from typing import Optional

LOG_FORMAT = '%(levelname)s: %(message)s'

_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger("combparse.config")

def _is_level(level: str) -> bool:
    return isinstance(logging.getLevelName(level), int)

@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from COMBPARSE_* environment variables."""
    log_level: str = "WARNING"
    trace: bool = False

    @classmethod
    def from_env(cls) -> 'Settings':
        """Unknown log levels fall back to the default with a warning."""
        level = os.environ.get("COMBPARSE_LOG_LEVEL", cls.log_level).strip().upper()
        if not _is_level(level):
            logger.warning(
                "Unknown log level in COMBPARSE_LOG_LEVEL: %s, using %s", level, cls.log_level
            )
            level = cls.log_level
        trace = os.environ.get("COMBPARSE_TRACE", "").strip().lower() in _TRUTHY
        return cls(log_level=level, trace=trace)

_settings: Optional[Settings] = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings

def reset_settings() -> None:
    global _settings
    _settings = None

def configure_logging(settings: Settings = None) -> None:
    """Install a root handler at the configured level. The library never calls this on import."""
    settings = settings or get_settings()
    level = settings.log_level.upper()
    if not _is_level(level):
        raise ValueError(f"Unknown log level: {settings.log_level}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("combparse").setLevel(level)
