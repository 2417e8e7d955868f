# projects_api/api/v1/projects.py

import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from projects_api.api.deps import get_db, get_publisher
from projects_api.events.projects import ProjectCreatedEvent
from projects_api.events.publisher import EventPublisher
from projects_api.mappers.projects import ProjectMapper
from projects_api.schemas.projects import ProjectCreate, ProjectRead, ProjectUpdate
from projects_api.services.projects_service import ProjectsService
from projects_api.utils.exceptions import (
    BadRequestException,
    NotFoundException,
    UnprocessableEntityException,
)

PREFIX = "/projects"

logger = logging.getLogger("api.projects")
router = APIRouter(prefix=PREFIX, tags=["projects"])
service = ProjectsService()
mapper = ProjectMapper()


@router.get("/{project_id}", response_model=ProjectRead)
async def find_one(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> ProjectRead:
    logger.info(f"[{PREFIX}] get id={project_id}")
    entity = await service.find_by_id(db, project_id)
    if entity is None:
        logger.warning(f"[{PREFIX}] get id={project_id} not found")
        raise NotFoundException(f"Project {project_id} not found")
    return mapper.project_to_project_dto(entity)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create(
    *,
    new_project: Optional[ProjectCreate] = Body(None, description="Данные для создания"),
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_publisher),
) -> ProjectRead:
    """
    Создать проект. Единственная проверка: name не None
    (пустое тело или null тоже дают 400).
    """
    logger.info(
        f"[{PREFIX}] create payload: %s",
        new_project.model_dump_json() if new_project is not None else None,
    )
    if new_project is None or new_project.name is None:
        raise BadRequestException("Project name must not be null")

    entity = mapper.project_dto_to_project(new_project)
    await publisher.publish(ProjectCreatedEvent(entity.name))
    saved = await service.save(db, entity)
    logger.info(f"[{PREFIX}] created id=%s", saved.id)
    return mapper.project_to_project_dto(saved)


@router.get("", response_model=List[ProjectRead])
async def find_all(
    db: AsyncSession = Depends(get_db),
) -> List[ProjectRead]:
    logger.info(f"[{PREFIX}] list")
    projects = await service.find_all(db)
    logger.debug(f"[{PREFIX}] list returned {len(projects)} items")
    return [mapper.project_to_project_dto(p) for p in projects]


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    *,
    project_id: int,
    updated_project: ProjectUpdate = Body(..., description="Новые данные проекта"),
    db: AsyncSession = Depends(get_db),
) -> ProjectRead:
    """
    Сохранить проект под id из пути.
    id в теле, если передан, обязан совпадать с id из пути.
    """
    logger.info(f"[{PREFIX}] update id=%s payload: %s", project_id, updated_project.model_dump_json())
    if updated_project.id is not None and updated_project.id != project_id:
        raise UnprocessableEntityException(
            f"Body id {updated_project.id} does not match path id {project_id}"
        )

    entity = mapper.project_dto_to_project(updated_project)
    entity.id = project_id
    saved = await service.save(db, entity)
    logger.info(f"[{PREFIX}] update id=%s saved as id=%s", project_id, saved.id)
    return mapper.project_to_project_dto(saved)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """
    Удалить проект. 204 возвращается и для несуществующего id.
    """
    logger.info(f"[{PREFIX}] delete id={project_id}")
    await service.delete_by_id(db, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
