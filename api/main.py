"""
Fixed Offset Timezone API - Main Application.

FastAPI application exposing fixed offset descriptions.
"""

import logging

from fastapi import FastAPI

from api import __version__
from services.settings import get_settings

logging.getLogger("api").setLevel(get_settings().log_level)

# Create FastAPI application
app = FastAPI(
    title="Fixed Offset Timezone API",
    description="Describe timezones defined by a constant offset from UTC",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "fixed-offset-tz-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Fixed Offset Timezone API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import offsets

app.include_router(offsets.router, prefix="/api/v1", tags=["Offsets"])
