# showcase_api/core/logging_.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from showcase_api.core.config import get_settings

# Loggers that also write to the services log file
SERVICE_LOGGERS = ("showcase_api.services", "showcase_api.providers")

_CONFIGURED = False


def _level(name: str) -> int:
    return getattr(logging, str(name).upper(), logging.INFO)


def setup_logging(force: bool = False) -> None:
    """
    Configure console + rotating file logging from settings.

    - root console handler at LOG_LEVEL
    - errors.log receives ERROR and above from every logger
    - services.log receives the services/providers loggers at LOG_LEVEL_SERVICES
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    settings = get_settings()
    formatter = logging.Formatter(settings.LOG_CONSOLE_FORMAT)

    root = logging.getLogger()
    root.setLevel(_level(settings.LOG_LEVEL))
    for h in list(root.handlers):
        if getattr(h, "_showcase", False):
            root.removeHandler(h)
            h.close()

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console._showcase = True  # type: ignore[attr-defined]
    root.addHandler(console)

    if settings.LOG_ERRORS_TO_FILE:
        settings.ERROR_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        errors = RotatingFileHandler(
            settings.ERROR_LOG_FILE,
            maxBytes=settings.ERROR_LOG_MAX_BYTES,
            backupCount=settings.ERROR_LOG_BACKUPS,
            encoding="utf-8",
        )
        errors.setLevel(logging.ERROR)
        errors.setFormatter(formatter)
        errors._showcase = True  # type: ignore[attr-defined]
        root.addHandler(errors)

    services_handler = None
    if settings.LOG_SERVICES_TO_FILE:
        settings.SERVICES_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        services_handler = RotatingFileHandler(
            settings.SERVICES_LOG_FILE,
            maxBytes=settings.ERROR_LOG_MAX_BYTES,
            backupCount=settings.ERROR_LOG_BACKUPS,
            encoding="utf-8",
        )
        services_handler.setFormatter(formatter)

    for name in SERVICE_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(_level(settings.LOG_LEVEL_SERVICES))
        for h in list(lg.handlers):
            lg.removeHandler(h)
            h.close()
        if services_handler is not None:
            lg.addHandler(services_handler)

    logging.getLogger("uvicorn.access").setLevel(_level(settings.LOG_LEVEL_UVICORN))
    _CONFIGURED = True
