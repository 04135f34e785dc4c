#!/usr/bin/env python3
"""
PyTest Configuration and Fixtures
Shared fixtures for the weather station tests
"""

import pytest
import copy
import itertools
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from weather_station.architecture.observers import Observer, WeatherStation
from weather_station.architecture.store import WeatherDataStore
from weather_station.config.station_config import DEFAULT_BASE_CONFIG
from weather_station.utils.logging import PACKAGE_LOGGER

# =====================================================
# Helpers
# =====================================================

class RecordingListener(Observer):
    """Listener that remembers every value, optionally into a shared log"""

    def __init__(self, observer_id: str, shared_log: List[tuple] = None):
        self.observer_id = observer_id
        self.received: List[str] = []
        self.shared_log = shared_log

    def update(self, value: str) -> None:
        self.received.append(value)
        if self.shared_log is not None:
            self.shared_log.append((self.observer_id, value))

class FakeClock:
    """Clock returning scripted values, one per call"""

    def __init__(self, values: Iterable):
        self._values = iter(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return next(self._values)

# =====================================================
# Function-scoped fixtures
# =====================================================

@pytest.fixture
def station() -> WeatherStation:
    return WeatherStation("Test Station")

@pytest.fixture
def store() -> WeatherDataStore:
    return WeatherDataStore()

@pytest.fixture
def delivery_log() -> List[tuple]:
    return []

@pytest.fixture
def make_listener(delivery_log):
    """Factory for recording listeners sharing one delivery log"""
    def _make(observer_id: str) -> RecordingListener:
        return RecordingListener(observer_id, delivery_log)
    return _make

@pytest.fixture
def fixed_clock() -> FakeClock:
    return FakeClock(itertools.repeat("T"))

@pytest.fixture
def ticking_clock() -> FakeClock:
    return FakeClock(itertools.count(1000))

@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Empty directory for configuration files"""
    directory = tmp_path / "environments"
    directory.mkdir()
    return directory

@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables"""
    for name in ("WEATHER_STATION_ENV", "WEATHER_LOG_LEVEL",
                 "WEATHER_INITIAL_STRATEGY", "WEATHER_STATION_NAME"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging so caplog sees records again"""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True

@pytest.fixture
def base_config() -> dict:
    return copy.deepcopy(DEFAULT_BASE_CONFIG)

# =====================================================
# Test environment setup
# =====================================================

def pytest_configure(config):
    """Configure pytest environment"""
    os.environ.setdefault('WEATHER_STATION_ENV', 'testing')

def pytest_collection_modifyitems(config, items):
    """Add markers based on test location"""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
