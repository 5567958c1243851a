"""
Cache key derivation for the reverse and forward geocoding caches.
"""
import base64
from typing import Tuple

# Coordinates are scaled by 10^6 and truncated toward zero
COORDINATE_SCALE = 1000000


def quantize(value: float) -> int:
    return int(value * COORDINATE_SCALE)


def quantize_coordinates(latitude: float, longitude: float) -> Tuple[int, int]:
    """
    Quantize a coordinate pair to integers.

    Coordinates that truncate to the same integers share one cache entry.
    """
    return quantize(latitude), quantize(longitude)


def reverse_cache_key(latitude: float, longitude: float) -> str:
    lat_e6, lng_e6 = quantize_coordinates(latitude, longitude)
    return f"{lat_e6}_{lng_e6}"


def forward_cache_key(address: str) -> str:
    """
    Encode an address as URL-safe base64 so it can be used as a file name.

    The address is used exactly as given (case and whitespace sensitive).
    """
    return base64.urlsafe_b64encode(address.encode("utf-8")).decode("ascii")


def decode_address_key(key: str) -> str:
    return base64.urlsafe_b64decode(key.encode("ascii")).decode("utf-8")
