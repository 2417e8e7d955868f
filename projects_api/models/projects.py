from __future__ import annotations
from datetime import date
from typing import Optional
from sqlalchemy import BigInteger, Date, Integer, String, PrimaryKeyConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from projects_api.db.base import Base

# Диапазон значений колонки id (BIGINT)
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1


class Projects(Base):
    """
    Проекты.
    """
    __tablename__ = "projects"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="projects_pkey"),
        {"comment": "Проекты"},
    )

    # BIGINT (int8); в SQLite INTEGER, чтобы PK оставался алиасом rowid
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True, comment="ID проекта",
    )
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, comment="Название проекта")
    date_created: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today, server_default=text("CURRENT_DATE"),
        comment="Дата создания",
    )

    def __repr__(self) -> str:
        return f"Projects(id={self.id!r}, name={self.name!r}, date_created={self.date_created!r})"
