from __future__ import annotations


class WeatherUnionError(Exception):
    pass

class NetworkError(WeatherUnionError):
    """The request never produced an HTTP response."""

class InvalidResponse(WeatherUnionError):
    """The response body is not JSON or not in the documented shape."""

class TemporarilyUnavailable(WeatherUnionError):
    """HTTP 200 whose body carries a provider message instead of readings."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class ApiStatusError(WeatherUnionError):
    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Error {status_code}: {detail}" if detail else f"Error {status_code}")

class NotSupported(ApiStatusError):
    """400: locality id or coordinates are not covered by the provider."""

class CouldNotAuthenticate(ApiStatusError):
    """403: api key missing or rejected."""

class ApiKeyLimitExhausted(ApiStatusError):
    """429: the api key's request quota is used up."""

class ErrorRetrievingData(ApiStatusError):
    """500: the provider failed to retrieve readings."""

class UnexpectedStatus(ApiStatusError):
    pass

class InvalidLocalityId(WeatherUnionError, ValueError):
    """Raised for an empty locality id, or one missing from the bundled table."""

    def __init__(self, locality_id: str):
        self.locality_id = locality_id
        super().__init__(f"Invalid locality id: {locality_id!r}")
