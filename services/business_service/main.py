"""
Catalog Business Service
Public catalog API; every call is served through the data service
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from shared.core import (
    ServiceHealth,
    setup_logging,
    RequestLoggingMiddleware,
    get_logger,
    http_dependency_check,
    install_error_handlers,
)
from business_service.api import router as business_router
from business_service.application.exceptions import DataServiceError
from business_service.core_settings import get_settings

settings = get_settings()

# Service configuration
SERVICE_NAME = "business-service"
SERVICE_VERSION = settings.SERVICE_VERSION
SERVICE_DESCRIPTION = "Catalog business microservice"

# Setup structured logging
setup_logging(service_name=SERVICE_NAME, level=settings.LOG_LEVEL)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    logger.info(f"Starting {SERVICE_NAME} version {SERVICE_VERSION}")
    logger.info(f"Data service at {settings.DATA_SERVICE_URL}")
    yield
    logger.info(f"Shutting down {SERVICE_NAME}")


app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

install_error_handlers(app, DataServiceError)

health_service = ServiceHealth(
    SERVICE_NAME,
    SERVICE_VERSION,
    checks={
        "data-service:reachability": http_dependency_check(
            f"{settings.DATA_SERVICE_URL}/health/live", timeout=settings.DATA_SERVICE_TIMEOUT
        )
    },
)
app.include_router(health_service.create_health_router())

app.include_router(business_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "status": "running",
        "docs": "/api/docs",
    }


@app.get("/info")
async def info():
    """Service information endpoint"""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "environment": settings.ENVIRONMENT,
        "data_service_url": settings.DATA_SERVICE_URL,
        "endpoints": {
            "categories": "/api/categories",
            "products": "/api/products",
            "inventory": "/api/inventory",
            "health": "/health",
            "ready": "/health/ready",
            "live": "/health/live",
            "metrics": "/metrics",
            "docs": "/api/docs",
        },
    }
