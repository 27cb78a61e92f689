"""Failures that end a weather lookup."""

from ..models.view_state import ErrorKind


class WeatherError(Exception):
    """Base class for all lookup failures."""

    kind: ErrorKind


class LocationError(WeatherError):
    """The location could not be determined."""


class GeolocationDeniedError(LocationError):
    kind = ErrorKind.GEOLOCATION_DENIED


class GeolocationUnsupportedError(LocationError):
    kind = ErrorKind.GEOLOCATION_UNSUPPORTED


class EmptyQueryError(LocationError):
    kind = ErrorKind.EMPTY_QUERY

    def __init__(self, message: str = "Empty city name") -> None:
        super().__init__(message)


class CityNotFoundError(LocationError):
    kind = ErrorKind.CITY_NOT_FOUND

    def __init__(self, city: str, status_code: int | None = None) -> None:
        super().__init__(f"City not found: {city!r}")
        self.city = city
        self.status_code = status_code


class FetchError(WeatherError):
    """The weather service could not deliver usable data."""


class NetworkError(FetchError):
    kind = ErrorKind.NETWORK


class UpstreamError(FetchError):
    kind = ErrorKind.UPSTREAM

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code


class MalformedResponseError(FetchError):
    kind = ErrorKind.MALFORMED_RESPONSE
