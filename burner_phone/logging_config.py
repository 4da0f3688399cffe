"""Logging bootstrap for the phone app."""

from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path
from typing import Optional

from burner_phone.config import LOG_DIR, LOG_LEVEL, LOG_RETENTION_DAYS


def configure_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[Path] = LOG_DIR,
    retention_days: int = LOG_RETENTION_DAYS,
) -> None:
    """Route records to the Textual devtools console and a rotating file.

    The terminal belongs to the app, so nothing is written to stderr.
    """
    handlers: dict[str, dict] = {
        "textual": {
            "class": "textual.logging.TextualHandler",
            "formatter": "default",
            "level": level,
        },
    }
    if log_dir is not None:
        log_dir = Path(log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["runtime_file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "default",
            "level": level,
            "filename": str(log_dir / "burner-phone.log"),
            "when": "midnight",
            "backupCount": max(int(retention_days), 1),
            "utc": True,
            "delay": True,
            "encoding": "utf-8",
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": handlers,
            "root": {"level": level, "handlers": list(handlers)},
        }
    )


__all__ = ["configure_logging"]
