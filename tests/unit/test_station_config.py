#!/usr/bin/env python3
"""
Unit Tests for Configuration Management
Tests for WeatherStationConfig and ConfigManager
"""

import pytest
import logging
import yaml
from pydantic import ValidationError

from weather_station.config.station_config import (
    WeatherStationConfig, ConfigManager, Environment,
    StationConfig, ReportsConfig, LoggingConfig, get_config
)


class TestEnvironmentEnum:
    """Tests for Environment enum"""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.PRODUCTION == "production"
        assert Environment.TESTING == "testing"


class TestConfigModels:
    """Tests for pydantic configuration models"""

    def test_defaults(self):
        config = WeatherStationConfig()

        assert config.environment == "development"
        assert config.station.readings == ["Sunny, 25°C", "Cloudy, 20°C"]
        assert config.reports.initial_strategy == "simple"
        assert config.reports.swap_strategy == "detailed"
        assert config.reports.layers == ["header", "footer", "timestamp"]
        assert config.logging.level == "INFO"

    def test_empty_station_name_rejected(self):
        with pytest.raises(ValidationError, match="Station name cannot be empty"):
            StationConfig(name="   ")

    def test_empty_readings_rejected(self):
        with pytest.raises(ValidationError, match="At least one reading"):
            StationConfig(readings=[])

    def test_unknown_source_rejected(self):
        with pytest.raises(ValidationError, match="Unknown weather source"):
            StationConfig(sources=["api", "radar"])

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError, match="Unknown reporting strategy"):
            ReportsConfig(initial_strategy="verbose")

    def test_unknown_layer_rejected(self):
        with pytest.raises(ValidationError, match="Unknown report layer"):
            ReportsConfig(layers=["header", "border"])

    def test_unknown_report_type_rejected(self):
        with pytest.raises(ValidationError, match="Unknown report type"):
            WeatherStationConfig(reports={"report_types": ["text", "pie"]})

    def test_report_types_assignment_validated(self):
        reports = ReportsConfig()
        with pytest.raises(ValidationError, match="Unknown report type"):
            reports.report_types = ["pie"]

    def test_strategy_assignment_validated(self):
        reports = ReportsConfig()
        with pytest.raises(ValidationError):
            reports.initial_strategy = "verbose"

    def test_logging_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_logging_level(self):
        with pytest.raises(ValidationError, match="Invalid logging level"):
            LoggingConfig(level="LOUD")


class TestConfigManager:
    """Tests for ConfigManager"""

    def test_load_packaged_testing_config(self, clean_env):
        config = ConfigManager().load_config("testing")

        assert config.environment == "testing"
        assert config.debug_mode is True
        assert config.logging.level == "DEBUG"
        assert config.station.sources == ["api", "sensor"]

    def test_load_packaged_production_config(self, clean_env):
        config = ConfigManager().load_config("production")

        assert config.logging.structured is True
        assert config.logging.level == "WARNING"

    def test_environment_from_env_var(self, clean_env):
        clean_env.setenv("WEATHER_STATION_ENV", "production")

        manager = ConfigManager()
        manager.load_config()

        assert manager.get_environment() == Environment.PRODUCTION

    def test_unknown_environment_defaults_to_development(self, clean_env, caplog):
        manager = ConfigManager()

        with caplog.at_level(logging.WARNING, logger="weather_station"):
            config = manager.load_config("staging")

        assert config.environment == "development"
        assert "Unknown environment 'staging'" in caplog.text

    def test_env_var_overrides(self, clean_env):
        clean_env.setenv("WEATHER_LOG_LEVEL", "error")
        clean_env.setenv("WEATHER_INITIAL_STRATEGY", "detailed")
        clean_env.setenv("WEATHER_STATION_NAME", "Rooftop")

        config = ConfigManager().load_config("development")

        assert config.logging.level == "ERROR"
        assert config.reports.initial_strategy == "detailed"
        assert config.station.name == "Rooftop"

    def test_invalid_env_override_rejected(self, clean_env):
        clean_env.setenv("WEATHER_INITIAL_STRATEGY", "verbose")

        with pytest.raises(ValidationError):
            ConfigManager().load_config("development")

    def test_missing_base_creates_defaults(self, clean_env, config_dir):
        manager = ConfigManager(config_dir)

        config = manager.load_config("development")

        assert (config_dir / "base.yaml").exists()
        assert (config_dir / "development.yaml").exists()
        assert (config_dir / "production.yaml").exists()
        assert (config_dir / "testing.yaml").exists()
        assert config.station.readings == ["Sunny, 25°C", "Cloudy, 20°C"]
        assert config.logging.level == "DEBUG"

    def test_fresh_directory_supports_testing_environment(self, clean_env, config_dir, caplog):
        with caplog.at_level(logging.WARNING, logger="weather_station"):
            config = ConfigManager(config_dir).load_config("testing")

        assert config.environment == "testing"
        assert config.logging.level == "DEBUG"
        assert config.logging.performance is False
        assert not any("not found" in record.getMessage() for record in caplog.records)

    def test_environment_file_deep_merges(self, clean_env, config_dir, base_config):
        with open(config_dir / "base.yaml", 'w', encoding='utf-8') as f:
            yaml.safe_dump(base_config, f, allow_unicode=True)
        with open(config_dir / "testing.yaml", 'w', encoding='utf-8') as f:
            yaml.safe_dump({"reports": {"layers": ["footer"]}, "station": {"name": "Lab"}}, f)

        config = ConfigManager(config_dir).load_config("testing")

        assert config.reports.layers == ["footer"]
        assert config.reports.initial_strategy == "simple"
        assert config.station.name == "Lab"
        assert config.station.readings == base_config["station"]["readings"]

    def test_missing_environment_file_uses_base(self, clean_env, config_dir, base_config):
        with open(config_dir / "base.yaml", 'w', encoding='utf-8') as f:
            yaml.safe_dump(base_config, f, allow_unicode=True)

        config = ConfigManager(config_dir).load_config("production")

        assert config.environment == "production"
        assert config.logging.level == "WARNING"

    def test_invalid_yaml_falls_back_to_defaults(self, clean_env, config_dir, caplog):
        (config_dir / "base.yaml").write_text("station: [unclosed", encoding='utf-8')

        with caplog.at_level(logging.ERROR, logger="weather_station"):
            config = ConfigManager(config_dir).load_config("testing")

        assert "Failed to load config" in caplog.text
        assert config.station.name == "Weather Station"

    def test_reload_config(self, clean_env):
        manager = ConfigManager()
        manager.load_config("testing")

        reloaded = manager.reload_config()

        assert reloaded.environment == "testing"
        assert manager.get_config() is reloaded

    def test_validate_config(self, base_config):
        manager = ConfigManager()

        assert manager.validate_config(base_config) is True

        base_config["reports"]["swap_strategy"] = "unknown"
        assert manager.validate_config(base_config) is False

    def test_get_config_convenience(self, clean_env, config_dir):
        config = get_config("testing", config_dir)
        assert isinstance(config, WeatherStationConfig)
