"""
Глобальная трансляция доменных исключений в HTTP-ответы.

BadRequestException          -> 400
NotFoundException            -> 404
UnprocessableEntityException -> 422

Тело ответа: HttpErrorInfo (timestamp, path, status, error, message).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from projects_api.schemas.errors import HttpErrorInfo
from projects_api.utils.exceptions import (
    BadRequestException,
    NotFoundException,
    UnprocessableEntityException,
)

logger = logging.getLogger("api.errors")


def create_http_error_info(http_status: int, request: Request, exc: Exception) -> HttpErrorInfo:
    """Собрать payload ошибки: статус, путь запроса, сообщение исключения."""
    return HttpErrorInfo.build(http_status, request.url.path, str(exc))


def _error_response(http_status: int, request: Request, exc: Exception) -> JSONResponse:
    info = create_http_error_info(http_status, request, exc)
    logger.warning(
        "%s %s -> %s: %s", request.method, request.url.path, http_status, info.message
    )
    return JSONResponse(status_code=http_status, content=jsonable_encoder(info))


def register_exception_handlers(app: FastAPI) -> None:
    """Зарегистрировать обработчики доменных ошибок на приложении."""

    @app.exception_handler(BadRequestException)
    async def handle_bad_request(request: Request, exc: BadRequestException) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, request, exc)

    @app.exception_handler(NotFoundException)
    async def handle_not_found(request: Request, exc: NotFoundException) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, request, exc)

    @app.exception_handler(UnprocessableEntityException)
    async def handle_unprocessable_entity(
        request: Request, exc: UnprocessableEntityException
    ) -> JSONResponse:
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, request, exc)
