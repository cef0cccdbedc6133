"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from lexibridge.config.loader import load_config_for_environment
from lexibridge.config.settings import Settings, get_settings
from lexibridge.core.dependencies import ServiceContainer
from lexibridge.core.error_handlers import setup_error_handlers
from lexibridge.core.logging import configure_logging
from lexibridge.core.metrics import record_latency

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings; the global instance when omitted
        container: Prebuilt service container, used by tests to inject sources

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    container = container or ServiceContainer(settings)
    configure_logging(settings.log_level.value)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")

        try:
            await container.initialize_services()
            app.state.service_container = container

            logger.info("Application startup complete")

            yield

        except Exception as e:
            logger.error(f"Application startup failed: {e}", exc_info=True)
            raise

        finally:
            logger.info("Shutting down application")
            await container.cleanup_services()
            logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request {request_id} started: {request.method} {request.url.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
            }
        )

        with record_latency(f"{request.method} {request.url.path}"):
            response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000

        logger.info(
            f"Request {request_id} completed: {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )

        response.headers["X-Request-ID"] = request_id
        return response

    from lexibridge.api import translation_router, dictionary_router, health_router
    app.include_router(translation_router)
    app.include_router(dictionary_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


def load_app_settings() -> Settings:
    """
    Settings for the served application.

    run.py exports ENVIRONMENT before starting uvicorn, so every worker
    process loads the same .env.<environment> file the launcher reported.
    """
    if os.getenv("ENVIRONMENT"):
        return load_config_for_environment()
    return get_settings()


# Create application instance
app = create_app(load_app_settings())
