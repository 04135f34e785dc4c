"""Configuration loading for the weather station"""

from .station_config import (
    Environment, ConfigManager, WeatherStationConfig,
    StationConfig, ReportsConfig, LoggingConfig, get_config
)

__all__ = [
    'Environment',
    'ConfigManager',
    'WeatherStationConfig',
    'StationConfig',
    'ReportsConfig',
    'LoggingConfig',
    'get_config'
]
