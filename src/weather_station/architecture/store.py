#!/usr/bin/env python3
"""
Weather Data Store
Explicitly constructed holder for weather readings
"""

from typing import List, Optional
import threading
import logging

logger = logging.getLogger(__name__)

class WeatherDataStore:
    """
    Ordered collection of weather readings.

    Owned by the composition root and passed to whoever needs it; there is
    no process-wide instance.
    """

    def __init__(self, readings: Optional[List[str]] = None):
        self._readings: List[str] = list(readings or [])
        self._lock = threading.Lock()

    def add_weather_data(self, data: str) -> None:
        """Append a reading"""
        with self._lock:
            self._readings.append(data)
        logger.debug(f"Stored weather data: {data}")

    def get_weather_data(self) -> List[str]:
        """Get a copy of all readings in insertion order"""
        with self._lock:
            return list(self._readings)

    def latest(self) -> Optional[str]:
        """Get the most recent reading"""
        with self._lock:
            return self._readings[-1] if self._readings else None

    def clear(self) -> None:
        with self._lock:
            self._readings.clear()

    def __len__(self) -> int:
        return len(self._readings)

    def __repr__(self) -> str:
        return f"WeatherDataStore(readings={len(self)})"
