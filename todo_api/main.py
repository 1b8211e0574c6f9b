"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api import categories, todos
from todo_api.config import Settings, get_settings
from todo_api.database import init_db
from todo_api.errors import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    app_settings: Settings = app.state.settings
    if app_settings.create_tables:
        init_db()
    logger.info("Todo API started (environment=%s)", app_settings.environment)
    yield


async def health_check(request: Request):
    """Health check endpoint."""
    return {"status": "healthy", "environment": request.app.state.settings.environment}


def create_app(app_settings: Settings) -> FastAPI:
    """Build the application for the given settings."""
    # Interactive docs are only served outside production
    docs_enabled = not app_settings.is_production

    app = FastAPI(
        title="TodoAPI",
        description="Keep track of your tasks",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(categories.router)
    app.include_router(todos.router)
    app.add_api_route("/health", health_check, methods=["GET"])

    return app


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("todo_api.main:app", host="0.0.0.0", port=8000, reload=settings.is_development)
