from __future__ import annotations
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ProjectCreate(BaseModel):
    # name не обязателен на уровне схемы: проверка на None делается в роутере (400, а не 422)
    id: Optional[int] = None
    name: Optional[str] = None
    date_created: Optional[date] = None


class ProjectUpdate(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    date_created: Optional[date] = None


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str] = None
    date_created: Optional[date] = None
