#!/usr/bin/env python3
"""
Weather Station Demo
Composition root wiring observers, strategies, factories, sources and
decorated reports together, plus the command-line entry point
"""

import argparse
import sys
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .architecture.observers import WeatherStation, WeatherDisplay, HistoryObserver
from .architecture.strategies import ReportingContext, create_strategy
from .architecture.factories import ReportFactory
from .architecture.sources import create_sources
from .architecture.reports import Clock, TextReport, decorate, render_stages
from .architecture.store import WeatherDataStore
from .config.station_config import ConfigManager, Environment, WeatherStationConfig
from .utils.logging import LogContext, configure_logging, log_fields, performance_monitor

logger = logging.getLogger(__name__)

@dataclass
class DemoResult:
    """Everything the demo built, plus the lines it printed"""
    station: WeatherStation
    store: WeatherDataStore
    history: HistoryObserver
    lines: List[str] = field(default_factory=list)

@performance_monitor()
def run_demo(config: Optional[WeatherStationConfig] = None,
             clock: Optional[Clock] = None) -> DemoResult:
    """
    Run the weather station demonstration

    Prints one line per event, in order: report generation, strategy
    reports, source fetches, each stage of the decorated report, then one
    display update per reading.

    Args:
        config: Application configuration, defaults when omitted
        clock: Time source for the timestamp layer

    Returns:
        DemoResult with the constructed station, store and printed lines
    """
    config = config or WeatherStationConfig()
    lines: List[str] = []

    def emit(line: str) -> None:
        lines.append(line)
        print(line)

    readings = config.station.readings

    with LogContext(logger, operation="weather_station_demo", station=config.station.name):
        # Observer
        station = WeatherStation(config.station.name)
        station.register(WeatherDisplay(output=emit))
        history = HistoryObserver()
        station.register(history)

        # Explicit data store
        store = WeatherDataStore()
        for reading in readings:
            store.add_weather_data(reading)
        logger.info(f"Data store holds {len(store)} readings", extra=log_fields(readings=len(store)))

        # Factory
        factory = ReportFactory()
        for report_type in config.reports.report_types:
            emit(factory.create(report_type).generate())

        # Strategy
        context = ReportingContext(create_strategy(config.reports.initial_strategy))
        emit(context.execute(readings[0]))
        context.set_strategy(create_strategy(config.reports.swap_strategy))
        emit(context.execute(readings[1 % len(readings)]))

        # Sources
        for source in create_sources(config.station.sources):
            emit(source.fetch_data())

        # Decorator
        report = decorate(
            TextReport(f"Weather: {readings[0]}"),
            config.reports.layers,
            clock=clock,
            header=config.reports.header_text,
            footer=config.reports.footer_text
        )
        for stage in render_stages(report):
            emit(stage)

        # Observer notifications
        for reading in readings:
            station.set_weather_data(reading)

    logger.debug(f"History summary: {history.get_history_summary()}")
    return DemoResult(station=station, store=store, history=history, lines=lines)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the weather station design patterns demo")

    parser.add_argument("--env", "-e", type=str, default=None,
                        choices=[env.value for env in Environment],
                        help="Configuration environment")
    parser.add_argument("--config-dir", "-c", type=str, default=None,
                        help="Directory holding base.yaml and environment files")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level, overrides configuration")
    parser.add_argument("--strategy", "-s", type=str, default=None,
                        help="Initial reporting strategy, overrides configuration")
    parser.add_argument("--structured-logs", action="store_true",
                        help="Emit JSON log lines")

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config_dir).load_config(args.env)

        if args.log_level:
            config.logging.level = args.log_level
        if args.structured_logs:
            config.logging.structured = True
        if args.strategy:
            config.reports.initial_strategy = args.strategy
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.logging)
    run_demo(config)
    return 0

if __name__ == "__main__":
    sys.exit(main())
