# projects_api/repos/projects_repo.py

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projects_api.models.projects import Projects
from projects_api.repos.base import BaseRepository


class ProjectsRepository(BaseRepository[Projects]):
    """
    Репозиторий проектов.
    """
    def __init__(self) -> None:
        super().__init__(Projects)

    async def list_all(self, db: AsyncSession) -> List[Projects]:
        """Все проекты без пагинации, по возрастанию id."""
        stmt = select(Projects).order_by(Projects.id)
        res = await db.execute(stmt)
        return list(res.scalars().all())
