"""
Geocoding Client
--------------
Forward and reverse geocoding against the Google Geocoding API (JSON output).
Every lookup checks the durable cache first and writes successful results back to it.
A lookup is a single request: failures are logged and returned as None, never retried or cached.
"""
import requests
import logging
import os
import concurrent.futures
from typing import Optional, Dict, Iterable, Tuple

from src.cache.store import CacheWriteError, GeoCache, build_cache
from src.models.geo import GeoCoordinate

# Constants
GEOCODING_BASE_URL = os.getenv("GEOCODING_BASE_URL", "https://maps.googleapis.com/maps/api/geocode/json")
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")
STATUS_OK = "OK"

# Get logger
logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(self, cache: Optional[GeoCache] = None, base_url=GEOCODING_BASE_URL, api_key=GOOGLE_MAPS_API_KEY, http=requests):
        self.cache = cache if cache is not None else build_cache()
        self.base_url = base_url
        self.api_key = api_key
        # Anything with a requests-style get(); the requests module opens one connection per call
        self.http = http

    def _request(self, params: Dict[str, str]) -> dict:
        if self.api_key:
            params["key"] = self.api_key
        response = self.http.get(self.base_url, params=params)
        response.raise_for_status()
        return response.json()

    def reverse_geocode(self, latitude: float, longitude: float) -> Optional[str]:
        """
        Return the formatted address for a coordinate pair, or None if it cannot be resolved.
        """
        address = self.cache.get_address(latitude, longitude)
        if address is not None:
            logger.debug(f"Cache hit for coordinates ({latitude}, {longitude})")
            return address

        try:
            data = self._request({"latlng": f"{latitude},{longitude}"})

            status = data.get("status")
            if status != STATUS_OK:
                logger.warning(f"Reverse geocoding returned status {status} for coordinates ({latitude}, {longitude})")
                return None

            address = data["results"][0]["formatted_address"]
            if not isinstance(address, str):
                raise TypeError(f"formatted_address is {type(address).__name__}, expected str")
        except requests.RequestException as e:
            logger.warning(f"Network error for coordinates ({latitude}, {longitude}): {e}")
            return None
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(f"Malformed reverse geocoding response for coordinates ({latitude}, {longitude}): {e!r}")
            return None

        try:
            self.cache.put_address(latitude, longitude, address)
        except CacheWriteError as e:
            logger.error(f"Could not cache address for coordinates ({latitude}, {longitude}): {e}")
        logger.info(f"Successfully geocoded coordinates ({latitude}, {longitude})")
        return address

    def forward_geocode(self, address: str) -> Optional[GeoCoordinate]:
        """
        Return the coordinates of an address, or None if it cannot be resolved.
        """
        coordinate = self.cache.get_coordinates(address)
        if coordinate is not None:
            logger.debug(f"Cache hit for address '{address}'")
            return coordinate

        try:
            data = self._request({"address": address})

            status = data.get("status")
            if status is not None and status != STATUS_OK:
                logger.warning(f"Geocoding returned status {status} for address '{address}'")
                return None

            location = data["results"][0]["geometry"]["location"]
            coordinate = GeoCoordinate(latitude=float(location["lat"]), longitude=float(location["lng"]))
        except requests.RequestException as e:
            logger.warning(f"Network error for address '{address}': {e}")
            return None
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(f"Malformed geocoding response for address '{address}': {e!r}")
            return None

        try:
            self.cache.put_coordinates(address, coordinate)
        except CacheWriteError as e:
            logger.error(f"Could not cache coordinates for address '{address}': {e}")
        logger.info(f"Successfully geocoded address '{address}'")
        return coordinate


_default_client = None

def get_default_client() -> GeocodingClient:
    global _default_client
    if _default_client is None:
        _default_client = GeocodingClient()
    return _default_client

def get_address_from_coordinates(latitude, longitude):
    return get_default_client().reverse_geocode(latitude, longitude)

def get_coordinates_from_address(address):
    return get_default_client().forward_geocode(address)


def _run_batch(func, items, max_workers, label):
    results = {}
    success_count = 0
    failure_count = 0

    total = len(items)
    logger.info(f"Starting parallel batch {label} for {total} items with {max_workers} workers")

    # Use ThreadPoolExecutor to geocode in parallel
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_item = {executor.submit(func, item): item for item in items}

        # Process results as they complete
        for i, future in enumerate(concurrent.futures.as_completed(future_to_item)):
            item = future_to_item[future]
            try:
                value = future.result()
            except Exception as e:
                logger.error(f"Error in batch {label} for {item}: {str(e)}")
                value = None

            results[item] = value
            if value is not None:
                success_count += 1
            else:
                failure_count += 1

            # Log progress every 10 items or at the end
            if (i + 1) % 10 == 0 or (i + 1) == total:
                logger.info(f"{label.capitalize()} progress: {i+1}/{total} ({((i+1)/total*100):.1f}%)")

    if total > 0:
        success_rate = (success_count / total) * 100
        logger.info(f"Batch {label} completed: {success_rate:.1f}% success rate ({success_count}/{total})")

    return results

def batch_reverse_geocode(coordinates_list: Iterable[Tuple[float, float]], max_workers=4, client=None):
    """
    Reverse geocode many (lat, lng) pairs in parallel.

    Returns a dict mapping each input pair to its address or None.
    """
    client = client or get_default_client()
    items = list(dict.fromkeys(coordinates_list))
    return _run_batch(lambda coords: client.reverse_geocode(*coords), items, max_workers, "reverse geocoding")

def batch_forward_geocode(addresses: Iterable[str], max_workers=4, client=None):
    """
    Geocode many addresses in parallel.

    Returns a dict mapping each address to its GeoCoordinate or None.
    """
    client = client or get_default_client()
    items = list(dict.fromkeys(addresses))
    return _run_batch(client.forward_geocode, items, max_workers, "geocoding")
