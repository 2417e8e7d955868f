# projects_api/api/main.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from projects_api.core.config import Settings
from projects_api.core.logger import setup_logging
from projects_api.api.errors import register_exception_handlers
from projects_api.events.projects import register_project_listeners
from projects_api.events.publisher import EventPublisher

# Роутеры
from projects_api.api.v1.projects import router as projects_router


# Настраиваем логи (файлы + консоль)
setup_logging()
logger = logging.getLogger("api.main")
settings = Settings()

app = FastAPI(title="Projects API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Публикатор событий: один на приложение, слушатели подписываются при старте
app.state.publisher = EventPublisher()
register_project_listeners(app.state.publisher)

# 400 / 404 / 422 для доменных исключений
register_exception_handlers(app)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Validation error at %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception at %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )

@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok"}


app.include_router(projects_router)
