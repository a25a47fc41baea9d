from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codeed import __version__
from codeed.api_routers.v1 import api_router
from codeed.features.health.routes.health import router as health_router
from codeed.platform.config import Settings, get_settings
from codeed.platform.db.session import Database
from codeed.platform.exceptions import add_exception_handlers
from codeed.platform.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR if settings.LOG_TO_FILE else None)

    database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_TABLES:
            logger.info("Creating database tables")
            await database.create_all()
        logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
        yield
        await database.dispose()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Learning platform backend: courses, articles, accounts and Telegram login",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    # Root endpoint for basic info
    @app.get("/", tags=["Info"])
    def root():
        return {
            "app_name": settings.APP_NAME,
            "version": __version__,
            "docs_url": "/docs",
            "api_base": "/api/v1",
        }

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
