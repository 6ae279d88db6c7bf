"""
FastAPI main application entry point.
"""

import os
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from usersearch.core.config import settings
from usersearch.core.logging import logger
from usersearch.api import router
from usersearch.api.error_handlers import register_error_handlers
from usersearch.services import SearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    dataset_path = app.state.search_service.dataset_path
    if os.path.isfile(dataset_path):
        logger.info(f"[Startup] Serving dataset {dataset_path}")
    else:
        logger.warning(f"[Startup] Dataset {dataset_path} not found, searches will fail until it exists")

    try:
        yield
    finally:
        logger.info("[Shutdown] Cleaning up…")


def create_app(dataset_path: Optional[str] = None) -> FastAPI:
    """Build the application bound to one dataset file."""
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.search_service = SearchService(dataset_path or settings.DATASET_PATH)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/")
    async def root():
        return {"status": "running"}

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
