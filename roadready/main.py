"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roadready.adapters.inbound.http.error_handlers import register_error_handlers
from roadready.adapters.inbound.http.routes import routers
from roadready.infrastructure.config.settings import settings
from roadready.infrastructure.db import init_db
from roadready.infrastructure.logging.logger import log_event

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_schema:
        init_db()
    log_event("startup", title=app.title, version=app.version)
    yield


def create_app() -> FastAPI:
    """
    Build the application: CORS, error translation and resource routers.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="RoadReady API",
        description="Car-rental booking API",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Added last so it is outermost and 500 responses carry CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in routers:
        app.include_router(router)

    return app


app = create_app()
