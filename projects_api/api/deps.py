from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from projects_api.db.session import get_async_db
from projects_api.events.publisher import EventPublisher


async def get_db(
    db: AsyncSession = Depends(get_async_db),
) -> AsyncSession:
    """
    Сессия БД на время запроса.
    """
    return db


def get_publisher(request: Request) -> EventPublisher:
    """
    Публикатор событий приложения (создаётся в api/main.py).
    """
    return request.app.state.publisher
