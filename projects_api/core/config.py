# projects_api/core/config.py

import os
from typing import List


class Settings:
    """
    Примитивная конфигурация приложения:
    всё берётся напрямую из os.environ (.env подгружается в run.py).
    """
    def __init__(self):
        # обязательная переменная
        try:
            self.database_url: str = os.environ["DATABASE_URL"]
        except KeyError as e:
            raise RuntimeError(f"Missing required environment variable: {e}")

        # необязательные, с дефолтами
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()
        self.log_dir: str = os.environ.get("LOG_DIR", "logs")

        # список origin-ов через запятую; "*": разрешить всё
        raw_origins = os.environ.get("CORS_ORIGINS", "*")
        self.cors_origins: List[str] = [
            origin.strip() for origin in raw_origins.split(",") if origin.strip()
        ]

        if not self.cors_origins:
            raise RuntimeError("CORS_ORIGINS must contain at least one origin")
