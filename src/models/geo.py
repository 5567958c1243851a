"""
Geo Models
---------
Pydantic models for coordinates and the request/response bodies of the geo tools API.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GeoCoordinate(BaseModel):
    """Immutable (latitude, longitude) pair in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def as_tuple(self):
        return (self.latitude, self.longitude)


class GeocodeResult(BaseModel):
    address: str
    latitude: float
    longitude: float


class ReverseGeocodeResult(BaseModel):
    latitude: float
    longitude: float
    address: str


class DistanceResult(BaseModel):
    distance: float
    unit: str


class BatchGeocodeRequest(BaseModel):
    addresses: List[str]
    max_workers: int = Field(4, ge=1, le=32)


class BatchGeocodeItem(BaseModel):
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    success: bool
