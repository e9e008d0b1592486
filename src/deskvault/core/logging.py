"""
Logging configuration module.

Every record carries the ID of the HTTP request that produced it. The
request middleware stores the ID in a context variable; RequestIdFilter
copies it onto each record so both the text and JSON formats can print it.
Records emitted outside a request (startup, shutdown) show "-".

Handlers:
- console (always)
- rotating application log and error-only log (LOG_FILE_ENABLED)
"""

import logging
import logging.config
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from deskvault.core.config import settings

NO_REQUEST_ID = "-"

request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)

TEXT_FORMAT = (
    "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s "
    "%(funcName)s:%(lineno)d - %(message)s"
)
JSON_FIELDS = (
    "%(asctime)s %(levelname)s %(request_id)s %(name)s "
    "%(funcName)s %(lineno)d %(message)s"
)

# Loggers that write to our handlers instead of propagating to root
OWN_LOGGERS = {
    "deskvault": None,
    "uvicorn": "INFO",
    "sqlalchemy.engine": "WARNING",  # INFO echoes every statement
}


class RequestIdFilter(logging.Filter):
    """Stamp the current request ID onto every record passing a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        return True


def setup_logging() -> None:
    """
    Configure application logging based on environment settings.

    Call this function at application startup, before any logging occurs.
    """
    if settings.log_file_enabled:
        Path(settings.log_file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config())

    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level} "
        f"format={settings.log_format} file_enabled={settings.log_file_enabled}"
    )


def _rotating_file_handler(filename: str, level: str, formatter: str) -> dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filters": ["request_id"],
        "filename": filename,
        "maxBytes": settings.log_file_max_bytes,
        "backupCount": settings.log_file_backup_count,
        "encoding": "utf-8",
    }


def get_logging_config() -> dict[str, Any]:
    """
    Get logging configuration dictionary.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "text"

    handlers: dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": formatter,
            "filters": ["request_id"],
            "stream": sys.stdout,
        },
    }
    if settings.log_file_enabled:
        log_path = Path(settings.log_file_path)
        handlers["file"] = _rotating_file_handler(
            str(log_path), settings.log_level, formatter
        )
        handlers["error_file"] = _rotating_file_handler(
            str(log_path.parent / "error.log"), "ERROR", formatter
        )
    handler_names = list(handlers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {"()": RequestIdFilter},
        },
        "formatters": {
            "text": {
                "format": TEXT_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": JSON_FIELDS,
            },
        },
        "handlers": handlers,
        "root": {
            "level": settings.log_level,
            "handlers": handler_names,
        },
        "loggers": {
            name: {
                "level": level or settings.log_level,
                "handlers": handler_names,
                "propagate": False,
            }
            for name, level in OWN_LOGGERS.items()
        },
    }
