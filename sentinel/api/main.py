"""
FastAPI Application — Live Dashboard API

Hosts the MonitoringEngine for the lifetime of the process: the clock
is armed on startup (when AUTOSTART is set) and always disarmed on
shutdown.

CORS: Configured via environment variables.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sentinel.config import settings
from .routes import router
from .services import get_engine


# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"🚀 Starting {settings.PROJECT_NAME}")
    logger.info(f"📍 Running in {settings.ENVIRONMENT} mode")
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    if settings.AUTOSTART:
        engine.start()
    yield
    # Shutdown
    engine.stop()
    logger.info(f"👋 Shutting down {settings.PROJECT_NAME}")


# Application metadata
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Live monitoring dashboard: random-walk load, latency jitter, log stream",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


app.include_router(router)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint — points at the docs and the dashboard."""
    return {
        "message": f"{settings.PROJECT_NAME} API",
        "docs": "/docs",
        "dashboard": "/dashboard",
    }


@app.get("/ping", tags=["Health"])
async def ping():
    """Lightweight heartbeat."""
    return {"status": "ok"}
