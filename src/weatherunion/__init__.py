"""
WeatherUnion API client for live locality weather readings.
Provides an async Python interface to the WeatherUnion REST endpoints.
"""

__all__ = [
    'WeatherUnion', 'WeatherUnionSettings', 'LocalityId', 'LocalityWeatherData', 'resolve_locality',
    'WeatherUnionError', 'NetworkError', 'InvalidResponse', 'TemporarilyUnavailable', 'ApiStatusError',
    'NotSupported', 'CouldNotAuthenticate', 'ApiKeyLimitExhausted', 'ErrorRetrievingData',
    'UnexpectedStatus', 'InvalidLocalityId',
]

from .client import WeatherUnion
from .errors import (
    WeatherUnionError, NetworkError, InvalidResponse, TemporarilyUnavailable,
    ApiStatusError, NotSupported, CouldNotAuthenticate, ApiKeyLimitExhausted, ErrorRetrievingData,
    UnexpectedStatus, InvalidLocalityId,
)
from .config import WeatherUnionSettings
from .locality import LocalityId, resolve_locality
from .models import LocalityWeatherData
