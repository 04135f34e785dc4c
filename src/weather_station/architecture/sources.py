#!/usr/bin/env python3
"""
Weather Sources
Static data sources sharing one fetch interface
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

class WeatherSource(ABC):
    """Anything that can fetch a weather reading"""

    @abstractmethod
    def fetch_data(self) -> str:
        pass

class ApiWeatherSource(WeatherSource):

    def fetch_data(self) -> str:
        return "API Weather Data"

class SensorWeatherSource(WeatherSource):

    def fetch_data(self) -> str:
        return "Sensor Weather Data"

SOURCE_REGISTRY: Dict[str, Type[WeatherSource]] = {
    'api': ApiWeatherSource,
    'sensor': SensorWeatherSource
}

def create_sources(names: List[str]) -> List[WeatherSource]:
    """Instantiate sources by registered name, in the given order"""
    unknown = [name for name in names if name not in SOURCE_REGISTRY]
    if unknown:
        available = ', '.join(SOURCE_REGISTRY.keys())
        raise ValueError(f"Unknown weather source(s): {', '.join(unknown)}. Available: {available}")

    return [SOURCE_REGISTRY[name]() for name in names]
