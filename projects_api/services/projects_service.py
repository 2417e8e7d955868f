# projects_api/services/projects_service.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from projects_api.models.projects import ID_MAX, ID_MIN, Projects
from projects_api.repos.projects_repo import ProjectsRepository
from projects_api.services.base import BaseService

logger = logging.getLogger("services.projects")


def _id_fits(id: int) -> bool:
    """id помещается в колонку projects.id (BIGINT)."""
    return ID_MIN <= id <= ID_MAX


class ProjectsService(BaseService[Projects]):
    """
    Сервис проектов.

    Базовый CRUD реализован в BaseService[Projects].
    Здесь операции, которыми пользуется роутер /projects:
    поиск по id, список, сохранение (create-or-update) и удаление по id.
    """

    def __init__(self, repo: Optional[ProjectsRepository] = None) -> None:
        super().__init__(repo or ProjectsRepository())

    async def find_by_id(self, db: AsyncSession, id: int) -> Optional[Projects]:
        """Проект по id или None (в том числе для id вне диапазона колонки)."""
        if not _id_fits(id):
            return None
        return await self.repo.get(db, id)

    async def find_all(self, db: AsyncSession) -> List[Projects]:
        """Все проекты (по возрастанию id)."""
        return await self.repo.list_all(db)

    async def save(self, db: AsyncSession, entity: Projects) -> Projects:
        """
        Сохранить проект.

        Если у entity есть id и такая запись существует, она перезаписывается
        (name всегда, date_created только если передана). Иначе создаётся новая
        запись, id назначает БД (id вне диапазона колонки считается отсутствующим).

        :param db: асинхронная сессия БД.
        :param entity: несохранённый ORM-объект (см. ProjectMapper).
        :return: сохранённый ORM-объект.
        """
        fields: Dict[str, Any] = {"name": entity.name}
        if entity.date_created is not None:
            fields["date_created"] = entity.date_created

        if entity.id is not None and _id_fits(entity.id):
            existing = await self.repo.get(db, entity.id)
            if existing is not None:
                logger.debug("save: overwrite project id=%s", entity.id)
                return await self.update(db, existing, fields)
            logger.debug("save: project id=%s not found, inserting new row", entity.id)

        return await self.create(db, fields)

    async def delete_by_id(self, db: AsyncSession, id: int) -> None:
        """Удалить проект по id; отсутствие записи ошибкой не считается."""
        if not _id_fits(id):
            return
        await self.repo.delete_by_ids(db, [id])
