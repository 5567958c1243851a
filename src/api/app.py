from fastapi import FastAPI, HTTPException, Depends, Query
from pydantic import ValidationError
import logging
import math

from src.geo.countries import lookup_country_name, all_countries
from src.geo.distance import distance_km, distance_meters
from src.geocoding.google import GeocodingClient, get_default_client, batch_forward_geocode
from src.models.geo import (
    GeoCoordinate, GeocodeResult, ReverseGeocodeResult, DistanceResult,
    BatchGeocodeRequest, BatchGeocodeItem
)

# Configure logging - Adjust format to remove INFO/WARNING prefixes
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Geo Tools API",
    description="Geocoding, reverse geocoding, distance and country name lookup",
    version="1.0.0"
)

def get_client() -> GeocodingClient:
    return get_default_client()

@app.get("/")
def read_root():
    return {"message": "Welcome to the Geo Tools API"}

@app.get("/countries")
def get_countries():
    """Return the full country code to country name table"""
    return all_countries()

@app.get("/countries/{code}")
def get_country(code: str):
    name = lookup_country_name(code)
    if name is None:
        raise HTTPException(status_code=404, detail=f"Unknown country code: {code}")
    return {"code": code.upper(), "name": name}

@app.get("/geocode", response_model=GeocodeResult)
def geocode(address: str = Query(..., min_length=1), client: GeocodingClient = Depends(get_client)):
    try:
        coordinate = client.forward_geocode(address)
        if coordinate is None:
            raise HTTPException(status_code=502, detail=f"Could not geocode address: {address}")
        return GeocodeResult(address=address, latitude=coordinate.latitude, longitude=coordinate.longitude)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error geocoding address '{address}': {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/reverse-geocode", response_model=ReverseGeocodeResult)
def reverse_geocode(latitude: float, longitude: float, client: GeocodingClient = Depends(get_client)):
    try:
        GeoCoordinate(latitude=latitude, longitude=longitude)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        address = client.reverse_geocode(latitude, longitude)
        if address is None:
            raise HTTPException(status_code=502, detail=f"Could not resolve coordinates ({latitude}, {longitude})")
        return ReverseGeocodeResult(latitude=latitude, longitude=longitude, address=address)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error reverse geocoding ({latitude}, {longitude}): {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/distance", response_model=DistanceResult)
def get_distance(lat1: float, lon1: float, lat2: float, lon2: float, unit: str = "km"):
    """Great-circle distance between (lat1, lon1) and (lat2, lon2)"""
    if not all(math.isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        raise HTTPException(status_code=422, detail="Coordinates must be finite numbers")
    if unit == "km":
        return DistanceResult(distance=distance_km(lat1, lon1, lat2, lon2), unit=unit)
    if unit == "m":
        return DistanceResult(distance=distance_meters(lat1, lon1, lat2, lon2), unit=unit)
    raise HTTPException(status_code=400, detail="Invalid unit. Please choose from: km, m")

@app.post("/geocode/batch")
def geocode_batch(request: BatchGeocodeRequest, client: GeocodingClient = Depends(get_client)):
    """
    Geocode a list of addresses in parallel.

    Args:
        request: addresses to resolve and the number of worker threads
    """
    try:
        results = batch_forward_geocode(request.addresses, max_workers=request.max_workers, client=client)

        items = []
        for address in dict.fromkeys(request.addresses):
            coordinate = results.get(address)
            items.append(BatchGeocodeItem(
                address=address,
                latitude=coordinate.latitude if coordinate else None,
                longitude=coordinate.longitude if coordinate else None,
                success=coordinate is not None
            ))

        resolved = sum(1 for item in items if item.success)
        return {
            "total": len(items),
            "resolved": resolved,
            "results": [item.model_dump() for item in items]
        }
    except Exception as e:
        logger.error(f"Error in batch geocoding: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
