"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from user_service import models  # noqa: F401  (registers tables on Base.metadata)
from user_service.config import configure_logging, get_settings
from user_service.database import Base, dispose_engine, get_engine, initialize_database
from user_service.exceptions import UserServiceError
from user_service.infrastructure.identity.routers import users

logger = structlog.get_logger(__name__)


def connect_database() -> None:
    """Create missing tables and verify the database is reachable."""
    engine = get_engine()
    try:
        Base.metadata.create_all(bind=engine)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("database_connection_failed", error=str(e))
        raise
    logger.info("database_connected", dialect=engine.dialect.name)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the database on startup and dispose of it on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    connect_database()
    logger.info("application_started", environment=settings.ENVIRONMENT, port=settings.PORT)

    yield

    dispose_engine()
    logger.info("application_stopped")


async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    """Render errors that escape a route as a generic error body."""
    logger.error("unhandled_service_error", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.add_exception_handler(UserServiceError, user_service_error_handler)  # type: ignore[arg-type]
    app.include_router(users.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
