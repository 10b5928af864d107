"""
Domain errors for the vehicles service and their HTTP mapping.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CarNotFoundError(Exception):
    """Raised when an id-based lookup finds no matching car."""

    def __init__(self, car_id: int | None = None):
        self.car_id = car_id
        message = f"Cannot find car with id : {car_id}" if car_id is not None else "Car not found"
        super().__init__(message)


def car_not_found_handler(_: Request, exc: CarNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def downstream_error_handler(request: Request, exc: Exception):
    # No retry or fallback: a failed pricing/maps call fails the request.
    logger.error(f"Downstream call failed during {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
