"""
Local Business Directory API
Cached homepage listings over the business directory database
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import businesses, cache as cache_routes
from app.cache import BusinessCache, CacheSweeper
from app.config.settings import (
    CACHE_CLEANUP_INTERVAL_SECONDS,
    CACHE_SWEEPER_ENABLED,
    CORS_ORIGINS,
    LOG_LEVEL,
)
from app.db.database import check_connection, engine, init_db
import app.models.models  # noqa: F401 ensures models are registered

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One cache per process, owned here and handed to routes via app.state
    business_cache = BusinessCache()
    sweeper = CacheSweeper(business_cache, interval=CACHE_CLEANUP_INTERVAL_SECONDS)
    app.state.business_cache = business_cache
    app.state.cache_sweeper = sweeper

    init_db()
    if CACHE_SWEEPER_ENABLED:
        sweeper.start()
    logger.info("Directory API started")
    try:
        yield
    finally:
        sweeper.stop()
        business_cache.clear()
        logger.info("Directory API stopped")


# Initialize FastAPI app
app = FastAPI(
    title="Local Business Directory API",
    description="Business listings with cached featured and random homepage sections",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS config for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(businesses.router)
app.include_router(cache_routes.router)


@app.get("/")
def root():
    """API health check and basic info"""
    return {
        "message": "Directory API is running",
        "version": "1.0.0",
        "status": "operational",
        "docs": "/docs",
        "endpoints": {
            "featured": "/api/businesses/featured",
            "random": "/api/businesses/random",
            "stats": "/api/businesses/stats",
            "categories": "/api/categories",
            "cache_stats": "/api/cache/stats",
        },
    }


@app.get("/health")
def health_check():
    """Simple health endpoint"""
    database = "connected" if check_connection(engine) else "unreachable"
    return {"status": "healthy", "database": database}


# Run with:
#   uvicorn main:app --reload --port 8000
