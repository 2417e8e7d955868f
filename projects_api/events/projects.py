# projects_api/events/projects.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from projects_api.events.publisher import EventPublisher

logger = logging.getLogger("events.projects")


@dataclass(frozen=True)
class ProjectCreatedEvent:
    """Публикуется роутером перед сохранением нового проекта."""

    project_name: str


def on_project_created(event: ProjectCreatedEvent) -> None:
    logger.info("New project created: %s", event.project_name)


def register_project_listeners(publisher: EventPublisher) -> None:
    """Подписать стандартных слушателей событий проектов."""
    publisher.subscribe(ProjectCreatedEvent, on_project_created)
