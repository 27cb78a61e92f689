"""Tests for the location resolver and the shared API client."""

import asyncio

import httpx
import pytest

from weatherview.models.weather import Coordinates, ResolvedLocation
from weatherview.services.errors import (
    CityNotFoundError,
    EmptyQueryError,
    MalformedResponseError,
    NetworkError,
    UpstreamError,
)
from weatherview.services.location import LocationResolver


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response."""

    def __init__(self, status_code=200, json=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated {self.exc.__name__}", request=request)
        return httpx.Response(self.status_code, json=self.json)


class TestOpenWeatherClient:
    """Tests for OpenWeatherClient request building and error mapping."""

    def test_adds_api_key_and_params(self, make_client):
        handler = RecordingHandler(json={"ok": True})
        client = make_client(handler, api_key="secret")

        result = asyncio.run(client.get_json("weather", {"q": "Oslo"}))

        assert result == {"ok": True}
        request = handler.requests[0]
        assert request.url.path == "/data/2.5/weather"
        assert request.url.params["q"] == "Oslo"
        assert request.url.params["appid"] == "secret"

    def test_timeout_is_network_error(self, make_client):
        client = make_client(RecordingHandler(exc=httpx.ReadTimeout))
        with pytest.raises(NetworkError):
            asyncio.run(client.get_json("weather", {}))

    def test_connection_error_is_network_error(self, make_client):
        client = make_client(RecordingHandler(exc=httpx.ConnectError))
        with pytest.raises(NetworkError):
            asyncio.run(client.get_json("weather", {}))

    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    def test_http_error_is_upstream_error(self, make_client, status):
        client = make_client(RecordingHandler(status_code=status, json={"cod": status}))
        with pytest.raises(UpstreamError) as exc_info:
            asyncio.run(client.get_json("weather", {}))
        assert exc_info.value.status_code == status

    def test_invalid_json_is_malformed(self, make_client):
        def handler(request):
            return httpx.Response(200, content=b"<html>not json</html>")

        client = make_client(handler)
        with pytest.raises(MalformedResponseError):
            asyncio.run(client.get_json("weather", {}))

    def test_corrupt_content_encoding_is_malformed(self, make_client):
        """Test a body that fails to decompress is reported as malformed."""

        def handler(request):
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")

        client = make_client(handler)
        with pytest.raises(MalformedResponseError):
            asyncio.run(client.get_json("weather", {}))

    def test_other_request_error_is_network_error(self, make_client):
        def handler(request):
            raise httpx.TooManyRedirects("redirect loop", request=request)

        client = make_client(handler)
        with pytest.raises(NetworkError):
            asyncio.run(client.get_json("weather", {}))


class TestResolveCoordinates:
    """Tests for the coordinate path."""

    def test_identity_without_network(self, make_client):
        handler = RecordingHandler(json={})
        resolver = LocationResolver(make_client(handler))
        coords = Coordinates(latitude=59.91, longitude=10.75)

        location = asyncio.run(resolver.resolve(coords))

        assert location == ResolvedLocation(coordinates=coords)
        assert location.name is None
        assert handler.requests == []


class TestResolveCity:
    """Tests for the city-name path."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_empty_query_makes_no_request(self, make_client, query):
        """Test blank names fail locally without any network call."""
        handler = RecordingHandler(json={})
        resolver = LocationResolver(make_client(handler))

        with pytest.raises(EmptyQueryError):
            asyncio.run(resolver.resolve(query))
        assert len(handler.requests) == 0

    def test_city_found(self, make_client, current_payload):
        handler = RecordingHandler(json=current_payload)
        resolver = LocationResolver(make_client(handler))

        location = asyncio.run(resolver.resolve("  Amsterdam "))

        assert location.coordinates == Coordinates(latitude=52.37, longitude=4.89)
        assert location.name == "Amsterdam"
        assert location.country == "NL"
        assert len(handler.requests) == 1
        assert handler.requests[0].url.params["q"] == "Amsterdam"

    def test_city_not_found(self, make_client):
        handler = RecordingHandler(status_code=404, json={"cod": "404", "message": "city not found"})
        resolver = LocationResolver(make_client(handler))

        with pytest.raises(CityNotFoundError) as exc_info:
            asyncio.run(resolver.resolve("Atlantis"))
        assert exc_info.value.city == "Atlantis"
        assert exc_info.value.status_code == 404

    def test_any_non_success_is_city_not_found(self, make_client):
        resolver = LocationResolver(make_client(RecordingHandler(status_code=401, json={})))
        with pytest.raises(CityNotFoundError):
            asyncio.run(resolver.resolve("Oslo"))

    def test_network_failure(self, make_client):
        resolver = LocationResolver(make_client(RecordingHandler(exc=httpx.ConnectTimeout)))
        with pytest.raises(NetworkError):
            asyncio.run(resolver.resolve("Oslo"))

    def test_missing_coordinates(self, make_client, current_payload):
        del current_payload["coord"]
        resolver = LocationResolver(make_client(RecordingHandler(json=current_payload)))
        with pytest.raises(MalformedResponseError):
            asyncio.run(resolver.resolve("Amsterdam"))

    def test_out_of_range_coordinates(self, make_client, current_payload):
        current_payload["coord"] = {"lat": 123.0, "lon": 4.89}
        resolver = LocationResolver(make_client(RecordingHandler(json=current_payload)))
        with pytest.raises(MalformedResponseError):
            asyncio.run(resolver.resolve("Amsterdam"))

    def test_missing_name_uses_query(self, make_client, current_payload):
        del current_payload["name"]
        del current_payload["sys"]
        resolver = LocationResolver(make_client(RecordingHandler(json=current_payload)))

        location = asyncio.run(resolver.resolve("Amsterdam"))

        assert location.name == "Amsterdam"
        assert location.country is None
