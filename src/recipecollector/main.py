"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipecollector.config import get_settings
from recipecollector.logging_config import configure_logging, get_logger
from recipecollector.routers import recipes_router

settings = get_settings()

# Production always logs JSON; elsewhere LOG_FORMAT decides
configure_logging(
    log_level=settings.log_level,
    json_format=True if settings.is_production else None,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting RecipeCollector API ({settings.environment})")
    yield
    logger.info("Shutting down RecipeCollector API")


app = FastAPI(
    title="RecipeCollector API",
    description="Recipe extraction with metric conversions",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipecollector-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "RecipeCollector API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
