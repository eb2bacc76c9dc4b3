"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import ProtusError
from modules.auth.routes import router as auth_router
from modules.discussions.routes import router as discussions_router
from modules.projects.routes import router as projects_router, tasks_router
from modules.team.routes import router as team_router

from .models.errors import ErrorResponse
from .routes import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(data store: {settings.data_store})"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def protus_error_handler(request: Request, exc: ProtusError) -> JSONResponse:
    """Render a ProtusError with its class status code."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are reported as INVALID_INPUT (400)."""
    body = ErrorResponse(
        error="INVALID_INPUT",
        message="Malformed request",
        details={"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for store/adapter failures and bugs."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Protus project management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error handlers
    app.add_exception_handler(ProtusError, protus_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(projects_router, prefix="/projects", tags=["projects"])
    app.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
    app.include_router(team_router, prefix="/team", tags=["team"])
    app.include_router(discussions_router, prefix="/discussions", tags=["discussions"])

    return app


# Application instance for uvicorn
app = create_app()
