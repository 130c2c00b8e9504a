"""
Product API - Backend
CRUD service over the products table
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from product_app.api import products
from product_app.api.products import error_response
from product_app.core.config import Settings, settings as default_settings
from product_app.core.database import DatabasePool, DATABASE_ERRORS

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """One-line description of the first validation problem"""
    errors = exc.errors()
    if not errors:
        return "Malformed request"

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    if not location:
        return message
    return f"{location}: {message}"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    The connection pool is created in the lifespan and kept on
    app.state.db_pool for the request dependencies.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db_pool = DatabasePool.from_settings(settings)
        try:
            yield
        finally:
            app.state.db_pool.close()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return error_response(400, describe_validation_error(exc))

    app.include_router(products.router, prefix="/api/v1/products", tags=["Products"])

    @app.get("/")
    async def root():
        """Endpoint raíz - Verificación de estado de la API"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint para monitoreo - tests database connectivity"""
        db_status = "connected"
        db_error = None

        start_time = time.time()
        try:
            request.app.state.db_pool.ping()
        except DATABASE_ERRORS as e:
            db_status = "disconnected"
            db_error = str(e)
        db_latency_ms = round((time.time() - start_time) * 1000, 2)

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "latency_ms": db_latency_ms,
                "error": db_error,
            },
        }

    return app


app = create_app()
