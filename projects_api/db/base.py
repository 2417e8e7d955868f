# projects_api/db/base.py

from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# ниже импорты всех моделей, чтобы они сразу зарегистрировались в метаданных
import projects_api.models.projects  # noqa: E402,F401
