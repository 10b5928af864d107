"""
Pydantic schemas for cars and for the pricing/maps wire formats.

Price and the address fields of Location are transient: they are filled in
from the pricing and maps services on read and never written to storage.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Condition(str, Enum):
    USED = "USED"
    NEW = "NEW"


class Manufacturer(BaseModel):
    code: int
    name: str


class Details(BaseModel):
    """Make/model/etc. of a car."""

    body: str
    model: str
    manufacturer: Manufacturer
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None


class Location(BaseModel):
    """Coordinates of a car, plus the reverse-geocoded address on read."""

    lat: float
    lon: float
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def stored(self) -> "Location":
        """Copy of this location without the transient address fields."""
        return Location(lat=self.lat, lon=self.lon)


class Car(BaseModel):
    id: int | None = None
    created_at: str | None = None
    modified_at: str | None = None
    condition: Condition
    details: Details
    location: Location
    price: str | None = None


class CarList(BaseModel):
    cars: list[Car] = Field(default_factory=list)
    count: int = 0


# ── Downstream wire models ──────────────────────────────────────────


class Price(BaseModel):
    """Pricing service response for GET /services/price."""

    model_config = ConfigDict(populate_by_name=True)

    vehicle_id: int | None = Field(None, alias="vehicleId")
    price: Decimal
    currency: str | None = None


class Address(BaseModel):
    """Maps service response for GET /maps."""

    address: str
    city: str
    state: str
    zip: str
