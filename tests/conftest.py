import pytest
import requests

from src.cache.store import build_cache
from src.geocoding.google import GeocodingClient


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeHttp:
    """Stands in for the requests module; records every GET."""

    def __init__(self, payload=None, error=None, status_code=200):
        self.payload = payload
        self.error = error
        self.status_code = status_code
        self.calls = []

    def get(self, url, params=None, **kwargs):
        self.calls.append((url, dict(params or {})))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.payload, self.status_code)


def reverse_payload(address):
    return {"status": "OK", "results": [{"formatted_address": address}]}


def forward_payload(lat, lng):
    return {"status": "OK", "results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}]}


@pytest.fixture
def cache(tmp_path):
    return build_cache("file", cache_dir=tmp_path)


@pytest.fixture
def make_client(cache):
    def _make(http, api_key=None):
        return GeocodingClient(cache=cache, base_url="https://geo.test/json", api_key=api_key, http=http)
    return _make
