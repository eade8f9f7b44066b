import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_records.api.errors import register_exception_handlers
from travel_records.api.v1.routes.attractions import popular_router
from travel_records.api.v1.routes.attractions import router as attractions_router
from travel_records.api.v1.routes.health import router as health_router
from travel_records.api.v1.routes.images import router as images_router
from travel_records.api.v1.routes.posts import router as posts_router
from travel_records.api.v1.routes.stages import router as stages_router
from travel_records.api.v1.routes.trips import router as trips_router
from travel_records.api.v1.routes.users import router as users_router
from travel_records.config import settings
from travel_records.core.database_init import initialize_database
from travel_records.tasks.staging_cleanup import sweep_staging_dir

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting up application...")

    if settings.USE_DB_REPOS:
        if not initialize_database():
            logger.error("Database initialization failed, requests will hit the database anyway")

    if settings.SWEEP_STAGING_ON_STARTUP:
        result = sweep_staging_dir(settings.MEDIA_STAGING_DIR, settings.MEDIA_STAGING_PATTERN)
        logger.info(f"Staging sweep on startup: {result}")

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    app = FastAPI(
        title="Travel Records",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(users_router)
    app.include_router(trips_router)
    app.include_router(stages_router)
    app.include_router(posts_router)
    app.include_router(attractions_router)
    app.include_router(popular_router)
    app.include_router(images_router)
    app.include_router(health_router)
    return app


app = create_app()
