# projects_api/mappers/projects.py

from __future__ import annotations

from typing import Union

from projects_api.models.projects import Projects
from projects_api.schemas.projects import ProjectCreate, ProjectRead, ProjectUpdate


class ProjectMapper:
    """
    Преобразования DTO <-> ORM-сущность для проектов.
    """

    @staticmethod
    def project_dto_to_project(dto: Union[ProjectCreate, ProjectUpdate]) -> Projects:
        """
        Несохранённая сущность из DTO.
        None-поля не передаются в конструктор, чтобы сработали дефолты модели
        (date_created = сегодня); name переносится как есть.
        """
        data = dto.model_dump(exclude_none=True)
        data.setdefault("name", None)
        return Projects(**data)

    @staticmethod
    def project_to_project_dto(entity: Projects) -> ProjectRead:
        """DTO для ответа API."""
        return ProjectRead.model_validate(entity)
