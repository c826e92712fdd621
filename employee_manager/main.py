"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.

Run with:
    uvicorn employee_manager.main:app --reload
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_manager import __version__
from employee_manager.api.errors import register_exception_handlers
from employee_manager.api.v1 import employee_router
from employee_manager.core.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure the root logger once for the API process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - `{message}` error handlers
    - API route registration
    - Startup/shutdown handlers for the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Employee Manager API",
        description="CRUD API for employee records backed by MongoDB",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(employee_router, prefix="/api/employees")

    @application.on_event("startup")
    def startup_event():
        """Ensure the unique email index exists before serving requests."""
        from employee_manager.api.v1.dependencies import get_employee_repository

        try:
            get_employee_repository().ensure_indexes()
            logger.info("Employee indexes ensured")
        except Exception:
            # The API still starts; store errors surface per request as 500s.
            logger.exception("Could not ensure employee indexes")

    @application.on_event("shutdown")
    def shutdown_event():
        """Close the cached MongoDB client."""
        from employee_manager.infrastructure.db.mongo_connection import get_mongo_client

        get_mongo_client().close()

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "Employee Manager API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
