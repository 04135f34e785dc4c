"""
Architecture Patterns Package
Observer, strategy, factory and decorator building blocks of the weather station
"""

from .observers import (
    Observer, NotificationHub, WeatherStation,
    WeatherDisplay, DataStoreObserver, HistoryObserver
)
from .strategies import (
    ReportingStrategy, SimpleReportStrategy, DetailedReportStrategy,
    ReportingContext, create_strategy
)
from .reports import (
    TextNode, TextReport, ReportDecorator,
    HeaderDecorator, FooterDecorator, TimestampDecorator,
    decorate, render_stages
)
from .factories import ReportFactory, WeatherReport, create_text_report, create_graphical_report
from .sources import WeatherSource, ApiWeatherSource, SensorWeatherSource
from .store import WeatherDataStore

__all__ = [
    # Observers
    'Observer',
    'NotificationHub',
    'WeatherStation',
    'WeatherDisplay',
    'DataStoreObserver',
    'HistoryObserver',

    # Strategies
    'ReportingStrategy',
    'SimpleReportStrategy',
    'DetailedReportStrategy',
    'ReportingContext',
    'create_strategy',

    # Reports
    'TextNode',
    'TextReport',
    'ReportDecorator',
    'HeaderDecorator',
    'FooterDecorator',
    'TimestampDecorator',
    'decorate',
    'render_stages',

    # Factories
    'ReportFactory',
    'WeatherReport',
    'create_text_report',
    'create_graphical_report',

    # Sources and storage
    'WeatherSource',
    'ApiWeatherSource',
    'SensorWeatherSource',
    'WeatherDataStore'
]
