"""Central logging configuration for the Workout Builder API.

Console and ``<log_dir>/app.log`` share one format. uvicorn's own loggers
are routed through the same handlers, since ``scripts/run_server.py`` starts
uvicorn without its default logging config.
"""
from __future__ import annotations

from logging.config import dictConfig

from pydantic import ValidationError

from app.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_configured = False


def build_logging_config(settings: Settings) -> dict:
    """Return the dictConfig payload for ``settings``."""

    level = settings.log_level
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": str(settings.log_dir / "app.log"),
                "encoding": "utf-8",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            # Handled once at the root; uvicorn would otherwise attach its own.
            name: {"handlers": [], "level": level, "propagate": True}
            for name in _UVICORN_LOGGERS
        },
        "root": {
            "level": level,
            "handlers": ["console", "file"],
        },
    }


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure application logging once per process.

    Args:
        settings: Settings the app is built with; defaults to the cached
            environment settings, or plain defaults when the environment
            holds an invalid value
    """
    global _configured
    if _configured:
        return

    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            # Still log, so the bad variable shows up when the app fails to start.
            settings = Settings.model_construct()
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(build_logging_config(settings))
    _configured = True
