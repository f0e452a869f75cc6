import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.common.exceptions import (
    ResourceNotFoundException,
    TemplateRenderException,
    database_exception_handler,
    resource_not_found_handler,
    template_render_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from src.config import get_settings
from src.healthcheck.router import router as health_router
from src.home.router import router as home_router
from src.tasks.router import forms_router as task_forms_router
from src.tasks.router import router as tasks_router
from src.tasks.store.sql.store import SQLTaskStore
from src.templating.renderer import TemplateRenderer

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.renderer = TemplateRenderer(settings.TEMPLATES_DIR)

    try:
        app.state.task_store = SQLTaskStore(
            database_url=settings.DATABASE_URL,
            table_name=settings.TASKS_TABLE,
        )
    except SQLAlchemyError as e:
        logger.exception("Failed to connect to the database")
        raise RuntimeError(f"Database initialization failed: {e}") from e

    yield
    app.state.task_store.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    version=settings.APP_VERSION,
)

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(TemplateRenderException)(template_render_exception_handler)
app.exception_handler(SQLAlchemyError)(database_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(home_router)
app.include_router(tasks_router)
app.include_router(task_forms_router)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
