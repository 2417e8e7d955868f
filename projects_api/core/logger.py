# projects_api/core/logger.py

import os
import logging
from logging.config import dictConfig
from projects_api.core.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"


def setup_logging() -> None:
    """
    Настройка корневого логгера:
    - консольный вывод;
    - ротация файловых логов в папке LOG_DIR, по 5 МБ, хранить 5 бэкапов.
    Вызывать до первого использования логера (см. api/main.py).
    """
    settings = Settings()

    os.makedirs(settings.log_dir, exist_ok=True)
    log_file = os.path.join(settings.log_dir, "app.log")

    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": settings.log_level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "default",
                "level": settings.log_level,
                "filename": log_file,
                "maxBytes": 5 * 1024 * 1024,     # 5 МБ
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        "root": {
            "handlers": ["console", "file"],
            "level": settings.log_level,
        },
    })

    # SQL-вывод идёт тем же уровнем, что и приложение
    logging.getLogger("sqlalchemy.engine").setLevel(settings.log_level)
