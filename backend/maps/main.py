"""
Maps FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from maps.api.routes import geocode
from maps.config import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
)

app.include_router(geocode.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
