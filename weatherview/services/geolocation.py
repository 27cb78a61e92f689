"""Device position providers."""

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from ..models.config import GeolocationConfig
from ..models.weather import Coordinates
from .errors import GeolocationDeniedError, GeolocationUnsupportedError

logger = logging.getLogger(__name__)

# Timeout for the IP lookup
HTTP_TIMEOUT = 10.0


class GeolocationProvider(Protocol):
    """One-shot source of the current position."""

    async def get_current_position(self) -> Coordinates: ...


class DisabledGeolocation:
    """Location access turned off by the user: every request is denied."""

    async def get_current_position(self) -> Coordinates:
        raise GeolocationDeniedError("Location access is disabled")


class FixedGeolocation:
    """Position taken from configuration."""

    def __init__(self, coordinates: Coordinates | None):
        self.coordinates = coordinates

    async def get_current_position(self) -> Coordinates:
        if self.coordinates is None:
            raise GeolocationUnsupportedError("No fixed position configured")
        return self.coordinates


class IPGeolocation:
    """Approximate position from an ip-api.com compatible lookup."""

    def __init__(
        self,
        lookup_url: str = "http://ip-api.com/json/",
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.lookup_url = lookup_url
        self.timeout = timeout
        self._transport = transport

    async def get_current_position(self) -> Coordinates:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.lookup_url)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPError as e:
            logger.warning(f"IP geolocation lookup failed: {e}")
            raise GeolocationUnsupportedError("Position lookup failed") from e

        except ValueError as e:
            logger.warning(f"IP geolocation returned invalid JSON: {e}")
            raise GeolocationUnsupportedError("Position lookup failed") from e

        if not isinstance(data, dict) or data.get("status", "success") != "success":
            logger.warning(f"IP geolocation refused: {data}")
            raise GeolocationUnsupportedError("Position lookup refused")

        try:
            coordinates = Coordinates(latitude=data["lat"], longitude=data["lon"])
        except (KeyError, ValidationError) as e:
            logger.warning(f"IP geolocation returned no usable position: {e}")
            raise GeolocationUnsupportedError("Position lookup failed") from e

        logger.debug(f"IP geolocation: {coordinates.latitude}, {coordinates.longitude}")
        return coordinates


def create_geolocation(config: GeolocationConfig) -> GeolocationProvider:
    """Build the provider selected in the configuration."""
    if config.provider == "disabled":
        return DisabledGeolocation()
    if config.provider == "fixed":
        return FixedGeolocation(config.coordinates)
    return IPGeolocation(lookup_url=config.lookup_url)
