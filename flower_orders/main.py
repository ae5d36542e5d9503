"""
FastAPI Application Entry Point - Flower Orders
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from flower_orders.api import custom_requests, health, orders, queues, settings as settings_api
from flower_orders.config import settings
from flower_orders.database import init_db
from flower_orders.services.catalog_client import CatalogError, CatalogUnavailableError
from flower_orders.services.exceptions import OrderDeskError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title="Flower Orders",
    description="Order and custom-request lifecycle service for the flower shop",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OrderDeskError)
async def order_desk_error_handler(request: Request, exc: OrderDeskError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": str(exc), "error": type(exc).__name__}
    )


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.warning("Catalog failure on %s: %s", request.url.path, exc)
    status_code = 503 if isinstance(exc, CatalogUnavailableError) else 502
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__}
    )


# Include routers
app.include_router(health.router)
app.include_router(orders.router)
app.include_router(custom_requests.router)
app.include_router(queues.router)
app.include_router(settings_api.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    logger.info("Starting %s...", settings.SERVICE_NAME)
    init_db()
    logger.info("✓ Database initialized")
    logger.info("✓ Catalog Service URL: %s", settings.CATALOG_SERVICE_URL)
    logger.info("✓ RabbitMQ URL: %s (events %s)", settings.RABBITMQ_URL,
                "enabled" if settings.EVENTS_ENABLED else "disabled")
    logger.info("✓ %s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", settings.SERVICE_NAME)
