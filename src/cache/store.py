"""
Cache Store
---------
File-backed key/value stores and the typed facade used by the geocoding client.
"""
import errno
import logging
import os
from pathlib import Path
from typing import Optional

from src.cache.keys import forward_cache_key, reverse_cache_key
from src.models.geo import GeoCoordinate

# Get logger
logger = logging.getLogger(__name__)

GEO_CACHE_DIR = os.getenv("GEO_CACHE_DIR", ".")
GEO_CACHE_BACKEND = os.getenv("GEO_CACHE_BACKEND", "file")

# Namespace names double as directory names for the file backend
REVERSE_NAMESPACE = "location_cache"
FORWARD_NAMESPACE = "address_cache"


class CacheWriteError(Exception):
    """Raised by a store when an entry could not be persisted."""


class FileCacheStore:
    """
    One text file per entry under <root>/<namespace>/<key>.txt.
    """

    def __init__(self, root, namespace: str):
        self.directory = Path(root) / namespace

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{key}.txt"

    def get(self, key: str) -> Optional[str]:
        try:
            with self._path_for(key).open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            # A name over the file system limit can never have been written
            if e.errno == errno.ENAMETOOLONG:
                return None
            raise

    def put(self, key: str, value: str) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with self._path_for(key).open("w", encoding="utf-8", newline="") as f:
                f.write(value)
        except OSError as e:
            # Very long addresses can exceed the file name limit
            raise CacheWriteError(f"Could not write {self._path_for(key)}: {e}") from e


class GeoCache:
    """
    Reverse (coordinates -> address) and forward (address -> coordinates) caches.

    Reads and writes are not atomic with respect to each other: two callers
    missing on the same key may both resolve it remotely, and the last write wins.
    """

    def __init__(self, reverse_store, forward_store):
        self.reverse_store = reverse_store
        self.forward_store = forward_store

    def get_address(self, latitude: float, longitude: float) -> Optional[str]:
        return self.reverse_store.get(reverse_cache_key(latitude, longitude))

    def put_address(self, latitude: float, longitude: float, address: str) -> None:
        self.reverse_store.put(reverse_cache_key(latitude, longitude), address)

    def get_coordinates(self, address: str) -> Optional[GeoCoordinate]:
        data = self.forward_store.get(forward_cache_key(address))
        if data is None:
            return None
        try:
            lat, lng = data.split(",")
            return GeoCoordinate(latitude=float(lat.strip()), longitude=float(lng.strip()))
        except ValueError as e:
            logger.warning(f"Ignoring unreadable cache entry for address '{address}': {e}")
            return None

    def put_coordinates(self, address: str, coordinate: GeoCoordinate) -> None:
        # repr() keeps every digit so the floats read back unchanged
        value = f"{coordinate.latitude!r},{coordinate.longitude!r}"
        self.forward_store.put(forward_cache_key(address), value)


def build_cache(backend: Optional[str] = None, cache_dir=None) -> GeoCache:
    """
    Build a GeoCache for the configured backend ("file" or "sql").
    """
    backend = (backend or GEO_CACHE_BACKEND).lower()

    if backend == "file":
        root = cache_dir if cache_dir is not None else GEO_CACHE_DIR
        logger.info(f"Using file cache under {Path(root).resolve()}")
        return GeoCache(FileCacheStore(root, REVERSE_NAMESPACE), FileCacheStore(root, FORWARD_NAMESPACE))

    if backend == "sql":
        from src.db.database import SqlCacheStore, create_tables

        create_tables()
        logger.info("Using SQL cache backend")
        return GeoCache(SqlCacheStore(REVERSE_NAMESPACE), SqlCacheStore(FORWARD_NAMESPACE))

    raise ValueError(f"Unknown cache backend: {backend}")
