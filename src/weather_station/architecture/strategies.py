#!/usr/bin/env python3
"""
Strategy Pattern Implementation
Interchangeable reporting strategies behind a stable call signature
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Type
import threading
import logging

logger = logging.getLogger(__name__)

class BaseStrategy(ABC):
    """Abstract base strategy"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self._setup()

    @abstractmethod
    def _setup(self) -> None:
        """Setup strategy-specific configuration"""
        pass

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """Execute the strategy"""
        pass

class ReportingStrategy(BaseStrategy):
    """Strategy turning a weather reading into a report line"""

    @abstractmethod
    def execute(self, weather_data: str) -> str:
        """Produce the report line for a reading"""
        pass

class SimpleReportStrategy(ReportingStrategy):
    """Labels the reading as-is"""

    def _setup(self) -> None:
        self.label = self.config.get('label', 'Simple Report')

    def execute(self, weather_data: str) -> str:
        return f"{self.label}: {weather_data}"

class DetailedReportStrategy(ReportingStrategy):
    """Elaborated form of the reading"""

    def _setup(self) -> None:
        self.label = self.config.get('label', 'Detailed Report')
        self.analysis_prefix = self.config.get('analysis_prefix', 'Detailed analysis of')

    def execute(self, weather_data: str) -> str:
        return f"{self.label}: {self.analysis_prefix} {weather_data}"

class ReportingContext:
    """
    Holds exactly one reporting strategy and delegates to it.

    ``execute`` always uses the strategy installed at the moment of the call.
    """

    def __init__(self, strategy: ReportingStrategy):
        self._lock = threading.Lock()
        self._strategy = self._validate(strategy)

    @staticmethod
    def _validate(strategy: Any) -> ReportingStrategy:
        if strategy is None:
            raise ValueError("ReportingContext requires a strategy")
        if not isinstance(strategy, ReportingStrategy):
            raise TypeError(f"Expected ReportingStrategy, got {type(strategy).__name__}")
        return strategy

    @property
    def strategy(self) -> ReportingStrategy:
        return self._strategy

    def set_strategy(self, strategy: ReportingStrategy) -> None:
        """Replace the current strategy"""
        strategy = self._validate(strategy)
        with self._lock:
            previous = self._strategy
            self._strategy = strategy
        logger.info(f"Reporting strategy changed: {type(previous).__name__} -> {type(strategy).__name__}")

    def execute(self, weather_data: str) -> str:
        """Run the current strategy"""
        with self._lock:
            strategy = self._strategy
        return strategy.execute(weather_data)

    def report(self, weather_data: str) -> str:
        """Run the current strategy and print its line"""
        line = self.execute(weather_data)
        print(line)
        return line

# Strategy registry for easy access
STRATEGY_REGISTRY: Dict[str, Type[ReportingStrategy]] = {
    'simple': SimpleReportStrategy,
    'detailed': DetailedReportStrategy
}

def create_strategy(strategy_name: str, config: Optional[Dict[str, Any]] = None) -> ReportingStrategy:
    """
    Create strategy instance

    Args:
        strategy_name: Registered strategy name ('simple', 'detailed')
        config: Configuration dictionary

    Returns:
        Strategy instance
    """
    if strategy_name not in STRATEGY_REGISTRY:
        available = ', '.join(STRATEGY_REGISTRY.keys())
        raise ValueError(f"Unknown reporting strategy: {strategy_name}. Available: {available}")

    strategy_class = STRATEGY_REGISTRY[strategy_name]
    return strategy_class(config)
