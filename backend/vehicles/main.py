"""
Vehicles FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from vehicles.api.routes import cars
from vehicles.config import settings
from vehicles.db import close_db, get_db
from vehicles.errors import CarNotFoundError, car_not_found_handler, downstream_error_handler

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("Starting Vehicles API...")
    logger.info(f"Pricing service at {settings.pricing_url}, maps service at {settings.maps_url}")
    await get_db()

    yield

    logger.info("Shutting down Vehicles API...")
    await close_db()


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(CarNotFoundError, car_not_found_handler)
# Pricing/maps transport failures and malformed pricing/maps payloads
app.add_exception_handler(httpx.HTTPError, downstream_error_handler)
app.add_exception_handler(ValidationError, downstream_error_handler)

app.include_router(cars.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Vehicles API",
        "version": settings.api_version,
        "endpoints": {
            "cars": "/cars",
            "car": "/cars/{id}",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
