"""
Thoron TMS service

Freight management API: carriers, shipments and tracking, documents,
invoices, users and the order load-planning workflow.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from shared.core import ServiceHealth, setup_logging, RequestLoggingMiddleware, get_logger
from app.core_settings import get_settings
from app.api import carriers, documents, invoices, orders, quotes, shipments, tracking, users
from app.infrastructure.db import SessionLocal, get_engine, init_models
from app.infrastructure.migrations import run_migrations
from app.infrastructure.seed import seed_demo_data

SERVICE_NAME = "tms-service"
SERVICE_DESCRIPTION = "Freight transportation management API"

settings = get_settings()

setup_logging(service_name=SERVICE_NAME, level=settings.LOG_LEVEL)

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {SERVICE_NAME} version {settings.SERVICE_VERSION}")

    if settings.RUN_MIGRATIONS:
        try:
            outcome = run_migrations()
            logger.info(f"Database migrations completed ({outcome})")
        except Exception as e:
            logger.error(f"Migration error: {e}", exc_info=True)

    try:
        init_models()
        logger.info("Database models initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database models: {e}")
        raise

    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()

    logger.info(f"{SERVICE_NAME} started successfully")

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")

app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

health_service = ServiceHealth(SERVICE_NAME, get_engine, settings.SERVICE_VERSION)
app.include_router(health_service.create_health_router(), prefix="/api")

for module in (orders, shipments, carriers, tracking, documents, invoices, users, quotes):
    app.include_router(module.router)

@app.get("/")
async def root():
    return {
        "service": SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "status": "running",
        "docs": "/api/docs"
    }
