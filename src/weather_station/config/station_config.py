#!/usr/bin/env python3
"""
Configuration Management
Environment-specific YAML configuration validated with pydantic
"""

import os
import yaml
from typing import Dict, Any, Optional, List, Union
from pathlib import Path
import logging
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum

from ..architecture.strategies import STRATEGY_REGISTRY
from ..architecture.factories import REPORT_REGISTRY
from ..architecture.reports import DECORATOR_REGISTRY, DEFAULT_HEADER, DEFAULT_FOOTER
from ..architecture.sources import SOURCE_REGISTRY

logger = logging.getLogger(__name__)

ENV_VAR = "WEATHER_STATION_ENV"

class Environment(str, Enum):
    """Environment types"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class StationConfig(BaseModel):
    """Weather station configuration"""
    name: str = Field(default="Weather Station", description="Station display name")
    readings: List[str] = Field(
        default_factory=lambda: ["Sunny, 25°C", "Cloudy, 20°C"],
        description="Readings published by the demo, in order"
    )
    sources: List[str] = Field(default_factory=lambda: ["api", "sensor"], description="Weather sources to fetch")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or v.isspace():
            raise ValueError('Station name cannot be empty')
        return v

    @field_validator('readings')
    @classmethod
    def validate_readings(cls, v):
        if not v:
            raise ValueError('At least one reading is required')
        return v

    @field_validator('sources')
    @classmethod
    def validate_sources(cls, v):
        unknown = [name for name in v if name not in SOURCE_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown weather source(s): {', '.join(unknown)}")
        return v

class ReportsConfig(BaseModel):
    """Report generation configuration"""
    model_config = ConfigDict(validate_assignment=True)

    initial_strategy: str = Field(default="simple", description="Strategy installed at startup")
    swap_strategy: str = Field(default="detailed", description="Strategy swapped in mid-sequence")
    header_text: str = Field(default=DEFAULT_HEADER, description="Header line")
    footer_text: str = Field(default=DEFAULT_FOOTER, description="Footer line")
    layers: List[str] = Field(
        default_factory=lambda: ["header", "footer", "timestamp"],
        description="Decoration layers, innermost first"
    )
    report_types: List[str] = Field(
        default_factory=lambda: ["text", "graphical"],
        description="Report types created through the factory"
    )

    @field_validator('initial_strategy', 'swap_strategy')
    @classmethod
    def validate_strategy(cls, v):
        if v not in STRATEGY_REGISTRY:
            raise ValueError(f"Unknown reporting strategy: {v}")
        return v

    @field_validator('layers')
    @classmethod
    def validate_layers(cls, v):
        unknown = [layer for layer in v if layer not in DECORATOR_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown report layer(s): {', '.join(unknown)}")
        return v

    @field_validator('report_types')
    @classmethod
    def validate_report_types(cls, v):
        unknown = [name for name in v if name not in REPORT_REGISTRY]
        if unknown:
            raise ValueError(f"Unknown report type(s): {', '.join(unknown)}")
        return v

class LoggingConfig(BaseModel):
    """Logging configuration"""
    model_config = ConfigDict(validate_assignment=True)

    level: str = Field(default="INFO", description="Logging level")
    structured: bool = Field(default=False, description="Enable JSON logging")
    performance: bool = Field(default=True, description="Include process memory in log lines")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid logging level: {v}")
        return level

class WeatherStationConfig(BaseModel):
    """Complete application configuration"""
    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Current environment")
    debug_mode: bool = Field(default=False, description="Enable debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    station: StationConfig = Field(default_factory=StationConfig)
    reports: ReportsConfig = Field(default_factory=ReportsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

DEFAULT_BASE_CONFIG: Dict[str, Any] = {
    "environment": "development",
    "debug_mode": False,
    "version": "1.0.0",
    "station": {
        "name": "Weather Station",
        "readings": ["Sunny, 25°C", "Cloudy, 20°C"],
        "sources": ["api", "sensor"]
    },
    "reports": {
        "initial_strategy": "simple",
        "swap_strategy": "detailed",
        "header_text": DEFAULT_HEADER,
        "footer_text": DEFAULT_FOOTER,
        "layers": ["header", "footer", "timestamp"],
        "report_types": ["text", "graphical"]
    },
    "logging": {
        "level": "WARNING",
        "structured": False,
        "performance": True
    }
}

class ConfigManager:
    """Configuration manager with environment-specific loading"""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir) if config_dir else Path(__file__).parent / "environments"

        self._config: Optional[WeatherStationConfig] = None
        self._environment: Optional[Environment] = None

    def load_config(self, environment: Optional[str] = None) -> WeatherStationConfig:
        """Load configuration for specified environment"""
        env = environment or os.getenv(ENV_VAR, "development")

        try:
            self._environment = Environment(env)
        except ValueError:
            logger.warning(f"Unknown environment '{env}', defaulting to development")
            self._environment = Environment.DEVELOPMENT

        base_config = self._load_base_config()
        env_config = self._load_environment_config(self._environment)

        merged_config = self._merge_configs(base_config, env_config)
        merged_config["environment"] = self._environment.value

        final_config = self._apply_env_overrides(merged_config)

        self._config = WeatherStationConfig(**final_config)

        logger.info(f"Configuration loaded for environment: {self._environment.value}")
        return self._config

    def _load_base_config(self) -> Dict[str, Any]:
        """Load base configuration"""
        base_config_path = self.config_dir / "base.yaml"

        if not base_config_path.exists():
            logger.info("Base configuration not found, creating default")
            self._create_default_configs()

        return self._load_yaml_file(base_config_path)

    def _load_environment_config(self, environment: Environment) -> Dict[str, Any]:
        """Load environment-specific configuration"""
        env_config_path = self.config_dir / f"{environment.value}.yaml"

        if env_config_path.exists():
            return self._load_yaml_file(env_config_path)
        else:
            logger.warning(f"Environment config not found: {env_config_path}")
            return {}

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from: {file_path}")
            return config
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {file_path}: {e}")
            return {}

    def _merge_configs(self, base_config: Dict[str, Any], env_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge base and environment configurations"""
        def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
            result = base.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        return deep_merge(base_config, env_config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides"""
        log_level = os.getenv("WEATHER_LOG_LEVEL")
        if log_level:
            config.setdefault("logging", {})["level"] = log_level

        initial_strategy = os.getenv("WEATHER_INITIAL_STRATEGY")
        if initial_strategy:
            config.setdefault("reports", {})["initial_strategy"] = initial_strategy

        station_name = os.getenv("WEATHER_STATION_NAME")
        if station_name:
            config.setdefault("station", {})["name"] = station_name

        return config

    def _create_default_configs(self) -> None:
        """Create default configuration files"""
        dev_config = {
            "debug_mode": True,
            "logging": {
                "level": "DEBUG"
            }
        }

        prod_config = {
            "debug_mode": False,
            "logging": {
                "level": "WARNING",
                "structured": True
            }
        }

        test_config = {
            "debug_mode": True,
            "logging": {
                "level": "DEBUG",
                "performance": False
            }
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._save_yaml_file(self.config_dir / "base.yaml", DEFAULT_BASE_CONFIG)
        self._save_yaml_file(self.config_dir / "development.yaml", dev_config)
        self._save_yaml_file(self.config_dir / "production.yaml", prod_config)
        self._save_yaml_file(self.config_dir / "testing.yaml", test_config)

        logger.info("Default configuration files created")

    def _save_yaml_file(self, file_path: Path, config: Dict[str, Any]) -> None:
        """Save configuration to YAML file"""
        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2, allow_unicode=True)
        logger.debug(f"Saved config to: {file_path}")

    def get_config(self) -> Optional[WeatherStationConfig]:
        """Get current configuration"""
        return self._config

    def get_environment(self) -> Optional[Environment]:
        """Get current environment"""
        return self._environment

    def reload_config(self) -> WeatherStationConfig:
        """Reload configuration"""
        return self.load_config(self._environment.value if self._environment else None)

    def validate_config(self, config_dict: Dict[str, Any]) -> bool:
        """Validate configuration dictionary"""
        try:
            WeatherStationConfig(**config_dict)
            return True
        except ValueError as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

def get_config(environment: Optional[str] = None,
               config_dir: Optional[Union[str, Path]] = None) -> WeatherStationConfig:
    """Load configuration for environment"""
    return ConfigManager(config_dir).load_config(environment)
