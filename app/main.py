"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.database import init_db
from app.errors import ConflictError, NotFoundError, StorageFaultError, ValidationFailedError
from app.logging_config import setup_logging
from app.routers import brands, models, vehicles

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    await init_db()
    logger.info("Database initialized; API available at %s", settings.api_v1_prefix)

    yield

    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})


async def validation_failed_handler(request: Request, exc: ValidationFailedError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": exc.message})


async def storage_fault_handler(request: Request, exc: StorageFaultError):
    # Cause is already logged by the repository; keep the body generic
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Build the application with routers, middleware and error handlers."""
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        ## Vehicle Registry API

        Manage vehicles and browse the brand/model catalog.

        ### Entities:
        * **Vehicles**: CRUD with unique plates; the detail view adds
          registration and inspection status from external services
        * **Brands**: read-only list
        * **Models**: read-only list per brand
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
    app.add_exception_handler(StorageFaultError, storage_fault_handler)

    # Include routers
    app.include_router(vehicles.router, prefix=settings.api_v1_prefix)
    app.include_router(brands.router, prefix=settings.api_v1_prefix)
    app.include_router(models.router, prefix=settings.api_v1_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
