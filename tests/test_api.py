import pytest
import requests
from fastapi.testclient import TestClient

from src.api.app import app, get_client
from src.models.geo import GeoCoordinate

from conftest import FakeHttp, forward_payload, reverse_payload


@pytest.fixture
def api(make_client):
    def _api(http):
        client = make_client(http)
        app.dependency_overrides[get_client] = lambda: client
        return TestClient(app)
    yield _api
    app.dependency_overrides.clear()


def test_root(api):
    response = api(FakeHttp()).get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_country_lookup(api):
    test_client = api(FakeHttp())
    response = test_client.get("/countries/us")
    assert response.status_code == 200
    assert response.json() == {"code": "US", "name": "United States"}

    assert test_client.get("/countries/zz").status_code == 404


def test_country_table(api):
    response = api(FakeHttp()).get("/countries")
    assert response.status_code == 200
    assert response.json()["KR"] == "Korea, Republic of"


def test_geocode_success(api):
    response = api(FakeHttp(forward_payload(1.2966, 103.7764))).get("/geocode", params={"address": "NUS, Singapore"})
    assert response.status_code == 200
    assert response.json() == {"address": "NUS, Singapore", "latitude": 1.2966, "longitude": 103.7764}


def test_geocode_failure_is_bad_gateway(api):
    http = FakeHttp(error=requests.ConnectionError("unreachable"))
    response = api(http).get("/geocode", params={"address": "NUS, Singapore"})
    assert response.status_code == 502


def test_reverse_geocode(api):
    test_client = api(FakeHttp(reverse_payload("21 Lower Kent Ridge Rd, Singapore 119077")))
    response = test_client.get("/reverse-geocode", params={"latitude": 1.2966, "longitude": 103.7764})
    assert response.status_code == 200
    assert response.json()["address"] == "21 Lower Kent Ridge Rd, Singapore 119077"


def test_reverse_geocode_errors(api):
    test_client = api(FakeHttp({"status": "ZERO_RESULTS", "results": []}))
    assert test_client.get("/reverse-geocode", params={"latitude": 1.0, "longitude": 2.0}).status_code == 502
    assert test_client.get("/reverse-geocode", params={"latitude": 95.0, "longitude": 2.0}).status_code == 422


def test_distance(api):
    test_client = api(FakeHttp())
    params = {"lat1": 1.304833, "lon1": 103.831833, "lat2": 1.346479, "lon2": 103.683478}

    km = test_client.get("/distance", params=params).json()
    assert km["unit"] == "km"
    assert 0 < km["distance"] < 20

    meters = test_client.get("/distance", params={**params, "unit": "m"}).json()
    assert meters["distance"] == pytest.approx(km["distance"] * 1000)

    assert test_client.get("/distance", params={**params, "unit": "miles"}).status_code == 400


def test_batch_geocode(api, cache):
    cache.put_coordinates("cached", GeoCoordinate(latitude=1.0, longitude=2.0))
    http = FakeHttp({"status": "ZERO_RESULTS", "results": []})
    response = api(http).post("/geocode/batch", json={"addresses": ["cached", "unknown"], "max_workers": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["resolved"] == 1
    assert body["results"][0] == {"address": "cached", "latitude": 1.0, "longitude": 2.0, "success": True}
    assert body["results"][1]["success"] is False


def test_distance_rejects_non_finite_coordinates(api):
    test_client = api(FakeHttp())
    for bad in ["nan", "inf", "-inf"]:
        params = {"lat1": bad, "lon1": 103.831833, "lat2": 1.346479, "lon2": 103.683478}
        assert test_client.get("/distance", params=params).status_code == 422
