#!/usr/bin/env python3
"""
Observer Pattern Implementation
Notification hub that fans weather readings out to registered listeners
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Callable, List, Optional
import threading
from datetime import datetime
import logging

from .store import WeatherDataStore

logger = logging.getLogger(__name__)

class Observer(ABC):
    """Abstract listener interface"""

    @abstractmethod
    def update(self, value: str) -> None:
        """Receive the hub's new value"""
        pass

    def get_observer_id(self) -> str:
        """Get observer identifier used in log lines"""
        return getattr(self, 'observer_id', self.__class__.__name__)

class NotificationHub:
    """
    Holds an ordered list of listeners and the last value set.

    Registration does not deduplicate: a listener registered twice is
    notified twice per value. Unregistering an absent listener is a no-op.
    """

    def __init__(self):
        self._observers: List[Observer] = []
        self._value: Optional[str] = None
        self._lock = threading.Lock()

    def register(self, observer: Observer) -> None:
        """Append a listener"""
        with self._lock:
            self._observers.append(observer)
        logger.info(f"Registered observer: {observer.get_observer_id()}")

    def unregister(self, observer: Observer) -> None:
        """Remove the first matching listener, if present"""
        with self._lock:
            if observer not in self._observers:
                logger.debug(f"Observer not registered: {observer.get_observer_id()}")
                return
            self._observers.remove(observer)
        logger.info(f"Unregistered observer: {observer.get_observer_id()}")

    def set_value(self, value: str) -> None:
        """Store the value and notify every registered listener in order"""
        with self._lock:
            self._value = value
            observers_copy = self._observers.copy()

        for observer in observers_copy:
            try:
                observer.update(value)
            except Exception as e:
                logger.error(f"Observer {observer.get_observer_id()} failed to handle update: {e}")

    @property
    def value(self) -> Optional[str]:
        """Last value set, None before the first update"""
        return self._value

    @property
    def listeners(self) -> List[Observer]:
        with self._lock:
            return self._observers.copy()

    def get_observer_count(self) -> int:
        """Get number of registered listeners"""
        with self._lock:
            return len(self._observers)

class WeatherStation(NotificationHub):
    """Notification hub for weather readings"""

    def __init__(self, name: str = "Weather Station"):
        super().__init__()
        self.name = name

    def set_weather_data(self, data: str) -> None:
        """Publish a new weather reading"""
        logger.debug(f"{self.name}: new weather data '{data}'")
        self.set_value(data)

    @property
    def weather_data(self) -> Optional[str]:
        return self.value

class WeatherDisplay(Observer):
    """Listener that prints each reading it receives"""

    def __init__(self,
                 observer_id: str = "weather_display",
                 label: str = "Weather Display",
                 output: Callable[[str], None] = print):
        self.observer_id = observer_id
        self.label = label
        self.output = output

    def format(self, value: str) -> str:
        return f"{self.label}: {value}"

    def update(self, value: str) -> None:
        self.output(self.format(value))

class DataStoreObserver(Observer):
    """Listener that records every reading into a WeatherDataStore"""

    def __init__(self, store: WeatherDataStore, observer_id: str = "data_store"):
        self.store = store
        self.observer_id = observer_id

    def update(self, value: str) -> None:
        self.store.add_weather_data(value)

class HistoryObserver(Observer):
    """Listener keeping a timestamped history of received readings"""

    def __init__(self, observer_id: str = "history", max_history_size: int = 1000):
        self.observer_id = observer_id
        self.max_history_size = max_history_size
        self.history: List[Dict[str, Any]] = []

    def update(self, value: str) -> None:
        self.history.append({
            'timestamp': datetime.now().isoformat(),
            'value': value
        })
        if len(self.history) > self.max_history_size:
            self.history.pop(0)

    def get_history_summary(self) -> Dict[str, Any]:
        """Get history summary"""
        if not self.history:
            return {'status': 'No updates received'}

        values = [entry['value'] for entry in self.history]
        return {
            'total_updates': len(values),
            'distinct_values': len(set(values)),
            'first_value': values[0],
            'last_value': values[-1],
            'recent_updates': self.history[-5:]
        }
