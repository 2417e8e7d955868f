# projects_api/schemas/errors.py
from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus

from pydantic import BaseModel, Field


class HttpErrorInfo(BaseModel):
    """
    Тело ответа для доменных ошибок (400/404/422).
    Создаётся один раз на упавший запрос и сразу сериализуется в JSON.
    """

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Момент формирования ответа (UTC)",
    )
    path: str = Field(..., description="Путь запроса")
    status: int = Field(..., description="HTTP-статус")
    error: str = Field(..., description="Текстовое описание статуса (reason phrase)")
    message: str = Field("", description="Сообщение исходного исключения")

    @classmethod
    def build(cls, status: int, path: str, message: str) -> "HttpErrorInfo":
        """Собрать payload; error берётся из стандартной таблицы статусов."""
        return cls(
            status=status,
            error=HTTPStatus(status).phrase,
            path=path,
            message=message,
        )
