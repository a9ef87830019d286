from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogError(ValueError):
    """Raised when a catalog cannot be loaded or violates its invariants."""


class PropertyKind(str, Enum):
    house = "House"
    apartment = "Apartment"


class Property(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    city: str
    kind: PropertyKind
    price: float = Field(..., gt=0)
    rooms: int = Field(..., ge=0)
    area: float = Field(..., gt=0, description="Surface in square meters")
    image: str = ""


class FilterCriteria(BaseModel):
    """Structured filter; every field is optional and present fields are ANDed."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    kind: PropertyKind | None = None
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    min_rooms: int | None = Field(default=None, ge=0)

    @field_validator("city")
    @classmethod
    def _blank_city_is_unset(cls, value: str | None) -> str | None:
        # An unselected city drop-down submits "".
        if value is not None and not value.strip():
            return None
        return value
