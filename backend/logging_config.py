"""Central logging configuration for the workout log."""

import logging
from logging.config import dictConfig
from typing import Any, Dict, Optional

from backend.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def _default_config(level: str) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def configure_logging(settings: Optional[Settings] = None, *, force: bool = False) -> None:
    """Configure application logging once per process."""
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    dictConfig(_default_config(settings.log_level))
    _configured = True
    logging.getLogger(__name__).debug(f"Logging configured at {settings.log_level}")
