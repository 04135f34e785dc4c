#!/usr/bin/env python3
"""
Factory Pattern Implementation
Registry-based creation of weather report generators
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List, Type
import inspect
import logging

logger = logging.getLogger(__name__)

class WeatherReport(ABC):
    """Report that announces its own generation"""

    @abstractmethod
    def generate(self) -> str:
        pass

class TextWeatherReport(WeatherReport):

    def generate(self) -> str:
        return "Generating text weather report."

class GraphicalWeatherReport(WeatherReport):

    def generate(self) -> str:
        return "Generating graphical weather report."

REPORT_REGISTRY: Dict[str, Type[WeatherReport]] = {
    'text': TextWeatherReport,
    'graphical': GraphicalWeatherReport,
}

class BaseFactory(ABC):
    """Abstract base factory with common functionality"""

    def __init__(self):
        self._registry: Dict[str, Type] = {}

    @abstractmethod
    def create(self, component_type: str, config: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        """Create component instance"""
        pass

    def register(self, name: str, component_class: Type) -> None:
        """Register a component class"""
        if not inspect.isclass(component_class):
            raise ValueError(f"Expected class, got {type(component_class)}")

        self._registry[name] = component_class
        logger.debug(f"Registered {component_class.__name__} as '{name}'")

    def list_registered(self) -> List[str]:
        """List all registered component names"""
        return list(self._registry.keys())

    def is_registered(self, name: str) -> bool:
        """Check if component is registered"""
        return name in self._registry

class ReportFactory(BaseFactory):
    """Factory for creating weather reports by name"""

    def __init__(self):
        super().__init__()
        for name, report_class in REPORT_REGISTRY.items():
            self.register(name, report_class)

    def create(self, report_type: str, config: Optional[Dict[str, Any]] = None, **kwargs) -> WeatherReport:
        """
        Create report instance

        Args:
            report_type: Type of report ('text', 'graphical' or a custom registration)
            config: Constructor keyword arguments
            **kwargs: Additional constructor arguments, overriding config

        Returns:
            Report instance

        Raises:
            ValueError: If report type not registered
            RuntimeError: If report construction fails
        """
        if not self.is_registered(report_type):
            raise ValueError(
                f"Report type '{report_type}' not registered. "
                f"Available: {', '.join(self.list_registered())}"
            )

        report_class = self._registry[report_type]

        try:
            final_config = {**(config or {}), **kwargs}
            return report_class(**final_config)
        except Exception as e:
            logger.error(f"Failed to create {report_type} report: {e}")
            raise RuntimeError(f"Report creation failed: {e}") from e

def create_text_report() -> WeatherReport:
    return TextWeatherReport()

def create_graphical_report() -> WeatherReport:
    return GraphicalWeatherReport()
