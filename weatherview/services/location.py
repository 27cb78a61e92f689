"""Location resolution: coordinates pass through, city names are looked up."""

import logging

from pydantic import ValidationError

from ..models.weather import Coordinates, LocationQuery, ResolvedLocation
from .errors import CityNotFoundError, EmptyQueryError, MalformedResponseError, UpstreamError
from .openweather import OpenWeatherClient

logger = logging.getLogger(__name__)


class LocationResolver:
    """Turn a location query into a canonical location."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def resolve(self, query: LocationQuery) -> ResolvedLocation:
        """Resolve coordinates (no network call) or a city name (one lookup).

        Raises:
            EmptyQueryError: blank city name; nothing is sent
            CityNotFoundError: the service answered with a non-success status
            NetworkError: transport failure or timeout
            MalformedResponseError: the answer carries no usable coordinates
        """
        if isinstance(query, Coordinates):
            return ResolvedLocation(coordinates=query)

        city = query.strip()
        if not city:
            raise EmptyQueryError()

        try:
            data = await self.client.get_json("weather", {"q": city})
        except UpstreamError as e:
            logger.info(f"City lookup for {city!r} failed with HTTP {e.status_code}")
            raise CityNotFoundError(city, e.status_code) from e

        try:
            coord = data["coord"]
            coordinates = Coordinates(latitude=coord["lat"], longitude=coord["lon"])
            country = (data.get("sys") or {}).get("country")
            location = ResolvedLocation(
                coordinates=coordinates,
                name=data.get("name") or city,
                country=country or None,
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            logger.error(f"Unexpected city lookup response for {city!r}: {e}")
            raise MalformedResponseError(f"No coordinates for {city!r}") from e

        logger.debug(f"Resolved {city!r} to {location.display_name} {coordinates}")
        return location
