from __future__ import annotations
from typing import Dict, Any, Optional
import logging
import httpx

from .config import DEFAULT_BASE_URL, WeatherUnionSettings
from .errors import (  # noqa: F401
    WeatherUnionError, NetworkError, InvalidResponse, TemporarilyUnavailable, ApiStatusError,
    NotSupported, CouldNotAuthenticate, ApiKeyLimitExhausted, ErrorRetrievingData, UnexpectedStatus,
)
from .locality import LocalityId, resolve_locality
from .models import LocalityWeatherData

API_KEY_HEADER = "x-zomato-api-key"


STATUS_ERRORS = {
    400: NotSupported,
    403: CouldNotAuthenticate,
    429: ApiKeyLimitExhausted,
    500: ErrorRetrievingData,
}

class WeatherUnion:
    """
    Async client for the WeatherUnion live weather API.

    Every fetch issues exactly one GET and either returns a fresh
    LocalityWeatherData or raises a WeatherUnionError. Nothing is cached or
    retried, and the handle holds no mutable state, so one instance can be
    shared between concurrent tasks.
    """

    def __init__(self, api_key: str, http: httpx.AsyncClient | None = None,
                 base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self._api_key = api_key
        # caller-owned when given; otherwise each request opens its own client
        self._http = http
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._log = logging.getLogger(__name__)

    @classmethod
    def from_key(cls, api_key: str) -> 'WeatherUnion':
        """Build a client from an api key. The key is only checked by the provider on fetch."""
        return cls(api_key)

    @classmethod
    def from_settings(cls, settings: WeatherUnionSettings,
                      http: httpx.AsyncClient | None = None) -> 'WeatherUnion':
        return cls(settings.api_key, http=http, base_url=settings.base_url, timeout=settings.timeout)

    @property
    def api_key(self) -> str:
        return self._api_key

    # ---------------- Internal Helpers -----------------
    async def _send(self, url: str, params: Dict[str, Any]) -> httpx.Response:
        headers = {API_KEY_HEADER: self._api_key}
        if self._http is not None:
            extra: Dict[str, Any] = {} if self._timeout is None else {'timeout': self._timeout}
            return await self._http.get(url, params=params, headers=headers, **extra)
        client_kwargs: Dict[str, Any] = {} if self._timeout is None else {'timeout': self._timeout}
        async with httpx.AsyncClient(**client_kwargs) as http:
            return await http.get(url, params=params, headers=headers)

    async def _get(self, path: str, params: Dict[str, Any]) -> LocalityWeatherData:
        url = f"{self._base_url}{path}"
        self._log.debug("GET %s %s", path, params)
        try:
            resp = await self._send(url, params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log.warning("Request to %s failed: %s", path, e)
            raise NetworkError(f"Request to {url} failed: {e}") from e
        return self._process_payload(resp)

    def _process_payload(self, resp: httpx.Response) -> LocalityWeatherData:
        if resp.status_code != 200:
            error_cls = STATUS_ERRORS.get(resp.status_code, UnexpectedStatus)
            self._log.warning("WeatherUnion returned %s (%s)", resp.status_code, error_cls.__name__)
            raise error_cls(resp.status_code, resp.text[:200])
        try:
            body = resp.json()
        except ValueError as e:  # JSON decode error
            raise InvalidResponse(f"Non-JSON response: {resp.text[:200]}") from e
        message = body.get('message') if isinstance(body, dict) else None
        if isinstance(message, str) and message:
            self._log.warning("WeatherUnion reported: %s", message)
            raise TemporarilyUnavailable(message)
        if isinstance(body, dict) and not isinstance(message, str):
            raise InvalidResponse(f"Missing message field: {body!r}"[:200])
        try:
            return LocalityWeatherData.from_payload(body)
        except ValueError as e:
            raise InvalidResponse(str(e)) from e

    # ---------------- Fetches -----------------
    async def locality(self, id: LocalityId) -> LocalityWeatherData:
        """Fetch readings for a bundled locality, e.g. ``await wu.locality(LocalityId.ZWL003467)``."""
        return await self.locality_id(resolve_locality(id))

    async def locality_id(self, id: str) -> LocalityWeatherData:
        """Fetch readings for a raw locality id string. The id is not checked against the bundled table."""
        locality_id = resolve_locality(id)
        return await self._get("/get_locality_weather_data", {'locality_id': locality_id})

    async def lat_long(self, latitude: float, longitude: float) -> LocalityWeatherData:
        """Fetch readings for the locality the provider matches to the given coordinates."""
        return await self._get("/get_weather_data", {'latitude': latitude, 'longitude': longitude})
