# projects_api/repos/base.py

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from projects_api.db.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic-репозиторий с базовым CRUD:
      - get/create/update
      - batch-удаление по списку PK
    Наследники передают модель в конструктор и добавляют domain-specific методы.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Получить объект по первичному ключу."""
        return await db.get(self.model, id)

    async def create(
        self,
        db: AsyncSession,
        obj_in: Dict[str, Any]
    ) -> ModelType:
        """Создать одну запись из словаря."""
        obj = self.model(**obj_in)
        db.add(obj)
        await db.commit()
        await db.refresh(obj)
        return obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        obj_in: Dict[str, Any]
    ) -> ModelType:
        """Обновить поля существующего объекта."""
        for field, value in obj_in.items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete_by_ids(
        self,
        db: AsyncSession,
        ids: List[Any]
    ) -> None:
        """
        Удалить несколько записей по списку первичных ключей.
        Отсутствующие ключи молча пропускаются.
        """
        stmt = delete(self.model).where(self.model.id.in_(ids))
        await db.execute(stmt)
        await db.commit()
