"""Thin async client for an OpenWeatherMap-compatible API."""

import logging
from typing import Any

import httpx

from ..models.config import WeatherConfig
from .errors import MalformedResponseError, NetworkError, UpstreamError

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Issues single GET requests and maps failures onto the error taxonomy.

    A new ``httpx.AsyncClient`` is opened per request so that concurrent
    calls never share connection state. Pass ``transport`` to route requests
    somewhere other than the network (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: WeatherConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.timeout = config.timeout_seconds
        self._transport = transport

    async def get_json(self, path: str, params: dict[str, Any]) -> Any:
        """GET ``{base_url}/{path}`` with the API key added and return decoded JSON.

        Raises:
            NetworkError: transport failure or timeout
            UpstreamError: non-success HTTP status
            MalformedResponseError: body cannot be decoded or is not JSON
        """
        url = f"{self.config.base_url}/{path.lstrip('/')}"
        params = {**params, "appid": self.config.resolve_api_key()}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout requesting {path} after {self.timeout:.0f}s")
            raise NetworkError("Request timeout") from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP error requesting {path}: {status}")
            raise UpstreamError(status) from e

        except httpx.TransportError as e:
            logger.error(f"Connection error requesting {path}: {e}")
            raise NetworkError("Connection error") from e

        except httpx.DecodingError as e:
            logger.error(f"Undecodable body from {path}: {e}")
            raise MalformedResponseError("Response body could not be decoded") from e

        except httpx.HTTPError as e:
            logger.error(f"Error requesting {path}: {e}")
            raise NetworkError(str(e) or "Request failed") from e

        except ValueError as e:
            logger.error(f"Invalid JSON from {path}: {e}")
            raise MalformedResponseError("Response is not valid JSON") from e
