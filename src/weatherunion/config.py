from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_BASE_URL = "https://www.weatherunion.com/gw/weather/external/v0"


@dataclass
class WeatherUnionSettings:
    """Configuration for the WeatherUnion API client."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # None keeps the httpx default
    localities: List[str] = field(default_factory=list)  # ids fetched by scripts/fetch_weather.py

    @staticmethod
    def from_env() -> 'WeatherUnionSettings':
        """Create settings from environment variables."""
        api_key = os.environ['WEATHERUNION_API_KEY']
        base_url = os.environ.get('WEATHERUNION_BASE_URL') or DEFAULT_BASE_URL
        timeout_raw = os.environ.get('WEATHERUNION_TIMEOUT')
        try:
            timeout = float(timeout_raw) if timeout_raw else None
        except ValueError:
            raise ValueError(f"Malformed WEATHERUNION_TIMEOUT: {timeout_raw!r}")
        localities_raw = os.environ.get('WEATHERUNION_LOCALITIES', '')
        localities = [part.strip() for part in localities_raw.split(',') if part.strip()]

        return WeatherUnionSettings(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            localities=localities,
        )
