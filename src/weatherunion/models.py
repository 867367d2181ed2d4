from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

READING_FIELDS = (
    'temperature',
    'humidity',
    'wind_speed',
    'wind_direction',
    'rain_intensity',
    'rain_accumulation',
)


@dataclass(frozen=True)
class LocalityWeatherData:
    """Live readings for one locality, as reported by the provider (no unit conversion)."""
    device_type: int
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_direction: Optional[float] = None
    rain_intensity: Optional[float] = None
    rain_accumulation: Optional[float] = None

    @classmethod
    def from_payload(cls, body: Dict[str, Any]) -> 'LocalityWeatherData':
        """Build a record from a decoded success body.

        Expected shape::

            {"status": "200", "message": "", "device_type": 1,
             "locality_weather_data": {"temperature": 24.5, "humidity": null, ...}}

        Raises ValueError when the body does not have that shape.
        """
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")
        device_type = body.get('device_type')
        if isinstance(device_type, bool) or not isinstance(device_type, int):
            raise ValueError(f"Missing or non-integer device_type: {device_type!r}")
        readings = body.get('locality_weather_data')
        if not isinstance(readings, dict):
            raise ValueError("Missing locality_weather_data object")
        values: Dict[str, Optional[float]] = {}
        for name in READING_FIELDS:
            raw = readings.get(name)
            # null and absent readings are both reported as None
            if raw is None:
                values[name] = None
            elif isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise ValueError(f"Non-numeric reading for {name}: {raw!r}")
            else:
                values[name] = float(raw)
        return cls(device_type=device_type, **values)
