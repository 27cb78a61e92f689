"""View state models.

Exactly one of the state variants below is active at any time. The
``status`` field is the discriminator, so a ``ViewState`` can be validated
from plain data as well as constructed directly.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .weather import LocationQuery, WeatherReport


class ViewStatus(str, Enum):
    """Status tag of a view state."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ErrorKind(str, Enum):
    """Failure kinds a lookup can end with."""

    GEOLOCATION_DENIED = "geolocation_denied"
    GEOLOCATION_UNSUPPORTED = "geolocation_unsupported"
    EMPTY_QUERY = "empty_query"
    CITY_NOT_FOUND = "city_not_found"
    NETWORK = "network"
    UPSTREAM = "upstream"
    MALFORMED_RESPONSE = "malformed_response"


class ErrorAction(str, Enum):
    """What the user is prompted to do after an error."""

    SEARCH = "search"
    RETRY = "retry"


class IdleState(BaseModel):
    """Nothing requested yet (or waiting for the device position)."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    """A lookup is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    query: LocationQuery | None = None  # None while the device position is looked up

    @property
    def is_locating(self) -> bool:
        return self.query is None


class ErrorState(BaseModel):
    """The last lookup failed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    kind: ErrorKind
    message: str
    action: ErrorAction = ErrorAction.RETRY


class ReadyState(BaseModel):
    """Weather for the most recent query is available."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ready"] = "ready"
    report: WeatherReport


ViewState = Annotated[
    IdleState | LoadingState | ErrorState | ReadyState,
    Field(discriminator="status"),
]
