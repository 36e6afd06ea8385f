"""
FastAPI main application entry point.
"""

from contextlib import asynccontextmanager
from typing import Optional, Sequence
from fastapi import FastAPI
from usersearch.core.config import settings
from usersearch.core.logging import logger
from usersearch.api import router
from usersearch.api.error_handlers import register_error_handlers
from usersearch.exceptions import DatasetError
from usersearch.schemas import UserRecord
from usersearch.services import SearchService
from usersearch.services.dataset import load_records


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    if getattr(app.state, "search_service", None) is None:
        try:
            logger.info("[Startup] Loading dataset...")
            app.state.search_service = SearchService(load_records(settings.DATASET_PATH))
        except DatasetError as e:
            logger.error(f"[Startup] Dataset load failed: {e.message}")
            logger.error("Continuing startup without records, searches will fail with 500")

    yield

    logger.info("[Shutdown] Shutting down")


def create_app(records: Optional[Sequence[UserRecord]] = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.search_service = SearchService(records) if records is not None else None

    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        workers=settings.WORKERS,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
