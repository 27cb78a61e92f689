"""Weather service for current conditions and the short-term forecast."""

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from ..models.weather import CurrentConditions, ForecastEntry, ResolvedLocation, WeatherReport
from .errors import MalformedResponseError
from .openweather import OpenWeatherClient

logger = logging.getLogger(__name__)

# Exceptions that mean the payload did not have the expected shape
_SHAPE_ERRORS = (KeyError, IndexError, TypeError, AttributeError, ValidationError)


async def _first_failure_wins(*coros: Any) -> list[Any]:
    """Run coroutines concurrently; on the first failure cancel the rest and raise it."""
    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and task.exception() is not None:
                raise task.exception()
        return [task.result() for task in tasks]
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


class WeatherService:
    """Service to fetch weather data for a resolved location."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client
        self.forecast_count = client.config.forecast_count
        self.forecast_limit = client.config.forecast_limit

    async def fetch_current_and_forecast(self, location: ResolvedLocation) -> WeatherReport:
        """Fetch current conditions and forecast concurrently.

        Either request failing aborts the pair with that error.

        Raises:
            NetworkError, UpstreamError, MalformedResponseError
        """
        coords = location.coordinates
        params = {"lat": coords.latitude, "lon": coords.longitude}

        current_data, forecast_data = await _first_failure_wins(
            self.client.get_json("weather", params),
            self.client.get_json("forecast", {**params, "cnt": self.forecast_count}),
        )

        current = self._parse_current(current_data)
        forecast = self._parse_forecast(forecast_data)

        if location.name is None:
            location = location.model_copy(
                update={"name": current.location_name or None, "country": current.country_code or None}
            )

        logger.debug(
            f"Fetched weather for {location.display_name}: "
            f"{current.condition_main}, {len(forecast)} forecast entries"
        )
        return WeatherReport(location=location, current=current, forecast=forecast)

    def _parse_current(self, data: Any) -> CurrentConditions:
        """Parse a current-conditions response."""
        try:
            main = data["main"]
            wind = data.get("wind") or {}
            sys = data.get("sys") or {}
            weather = data["weather"][0]

            return CurrentConditions(
                location_name=data.get("name", ""),
                country_code=sys.get("country", ""),
                temperature=main["temp"],
                feels_like=main.get("feels_like", main["temp"]),
                temp_min=main.get("temp_min", main["temp"]),
                temp_max=main.get("temp_max", main["temp"]),
                humidity=main["humidity"],
                pressure=main["pressure"],
                wind_speed=wind.get("speed", 0.0),
                wind_degrees=wind.get("deg", 0.0),
                visibility=data.get("visibility"),
                condition_main=weather["main"],
                condition_description=weather.get("description", ""),
                sunrise=sys.get("sunrise"),
                sunset=sys.get("sunset"),
                timezone_offset=data.get("timezone", 0),
            )

        except _SHAPE_ERRORS as e:
            logger.error(f"Error parsing current weather response: {e}")
            raise MalformedResponseError(f"Unexpected current weather payload: {e}") from e

    def _parse_forecast(self, data: Any) -> list[ForecastEntry]:
        """Parse a forecast response, keeping the first entries in time order.

        Entries sharing a timestamp are kept in the order received.
        """
        try:
            entries = [
                ForecastEntry(
                    timestamp=item["dt"],
                    temperature=item["main"]["temp"],
                    condition_main=item["weather"][0]["main"],
                )
                for item in data["list"]
            ]

        except _SHAPE_ERRORS as e:
            logger.error(f"Error parsing forecast response: {e}")
            raise MalformedResponseError(f"Unexpected forecast payload: {e}") from e

        entries.sort(key=lambda entry: entry.timestamp)
        return entries[: self.forecast_limit]
