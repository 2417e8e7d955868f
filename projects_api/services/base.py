from __future__ import annotations

from typing import Any, Dict, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from projects_api.db.base import Base
from projects_api.repos.base import BaseRepository

ModelType = TypeVar("ModelType", bound=Base)


class BaseService(Generic[ModelType]):
    """
    Generic-сервис: минимальный CRUD, делегирующий BaseRepository.
    Конкретные сервисы наследуют его и добавляют domain-specific методы.
    """

    def __init__(self, repo: BaseRepository[ModelType]):
        """
        :param repo: репозиторий, инстанс BaseRepository[ModelType]
        """
        self.repo = repo

    async def create(
        self, db: AsyncSession, obj_in: Dict[str, Any]
    ) -> ModelType:
        """Создать запись."""
        return await self.repo.create(db, obj_in)

    async def update(
        self, db: AsyncSession, db_obj: ModelType, obj_in: Dict[str, Any]
    ) -> ModelType:
        """Обновить запись."""
        return await self.repo.update(db, db_obj, obj_in)
