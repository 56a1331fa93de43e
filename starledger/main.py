import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starledger import __version__
from starledger.api import create_api_router
from starledger.api.error_handlers import register_error_handlers
from starledger.api.routers import health
from starledger.core.config import Settings, get_settings
from starledger.core.container import ApplicationContainer
from starledger.infrastructure.database import init_db
from starledger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    settings = container.settings
    setup_logging(settings.logging.level, settings.logging.format)
    if settings.environment in {"development", "test"}:
        await init_db(container.engine)
    logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
    yield
    await container.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="uid8 handles and star balances",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(create_api_router(settings.api_prefix))
    return app
