"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

import structlog
import uvicorn
from fastapi import Depends, FastAPI
from lagom import Container

from infrastructure.config import Settings, settings
from infrastructure.logging import setup_logging
from interfaces.dependencies import get_container

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env)

    # Construction failures propagate and abort startup
    container = get_container()
    if Settings not in container.defined_types:
        container[Settings] = settings
    app.state.container = container

    logger.info("app_ready")

    yield

    # Cleanup
    logger.info("app_shutting_down")
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Container locator API",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/health/container")
    async def container_health(
        container: Annotated[Container, Depends(get_container)],
    ) -> dict[str, str]:
        """Report that the shared container is available and wired at startup."""
        runtime_settings = container[Settings]
        return {
            "status": "ready",
            "container": type(container).__name__,
            "app_name": runtime_settings.app_name,
            "app_env": runtime_settings.app_env,
        }

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    run()
