#!/usr/bin/env python3
"""
Logging Utilities
Stderr logging for the weather station: JSON lines, memory-tagged text
lines, operation contexts and a timing decorator
"""

import logging
import sys
import json
import time
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
from datetime import datetime
from functools import wraps
import psutil

# Root logger name shared by every module of the package
PACKAGE_LOGGER = "weather_station"

TEXT_FORMAT = '[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s%(location)s'
MEMORY_FORMAT = '[%(asctime)s] [%(levelname)-8s] [%(name)s] [%(memory_mb).0fMB] %(message)s%(location)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def process_memory_mb() -> float:
    """Resident memory of the current process in megabytes"""
    return psutil.Process().memory_info().rss / 1024 / 1024

def log_fields(**fields) -> Dict[str, Any]:
    """Build the ``extra`` mapping understood by StructuredFormatter"""
    return {'extra_fields': fields}

class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with any ``log_fields`` merged in"""

    def format(self, record):
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        entry.update(getattr(record, 'extra_fields', {}))

        return json.dumps(entry, ensure_ascii=False, default=str)

class StationTextFormatter(logging.Formatter):
    """Plain text lines; DEBUG records also name their source location"""

    def __init__(self, fmt: str = TEXT_FORMAT):
        super().__init__(fmt, datefmt=DATE_FORMAT)

    def format(self, record):
        if record.levelno == logging.DEBUG:
            record.location = f" ({record.filename}:{record.lineno})"
        else:
            record.location = ""
        return super().format(record)

class PerformanceFormatter(StationTextFormatter):
    """Text lines tagged with the process memory at emit time"""

    def __init__(self):
        super().__init__(MEMORY_FORMAT)

    def format(self, record):
        record.memory_mb = process_memory_mb()
        return super().format(record)

def _select_formatter(structured: bool, performance: bool) -> logging.Formatter:
    if structured:
        return StructuredFormatter()
    if performance:
        return PerformanceFormatter()
    return StationTextFormatter()

def setup_logger(name: str,
                level: Union[str, int] = "INFO",
                log_file: Optional[Union[str, Path]] = None,
                structured: bool = False,
                performance: bool = True) -> logging.Logger:
    """
    Setup a logger writing to stderr and, optionally, a file

    Stdout is left to the demo's event lines. Calling this again for the same
    name replaces the previous handlers.

    Args:
        name: Logger name
        level: Logging level name or number
        log_file: Optional log file path, parent directories are created
        structured: Use JSON lines
        performance: Tag text lines with process memory

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    formatter = _select_formatter(structured, performance)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger

def configure_logging(logging_config: Any) -> logging.Logger:
    """
    Configure the package logger from a LoggingConfig section

    Every module logs through ``logging.getLogger(__name__)``, so configuring
    the package root is enough.
    """
    return setup_logger(
        PACKAGE_LOGGER,
        level=logging_config.level,
        log_file=logging_config.log_file,
        structured=logging_config.structured,
        performance=logging_config.performance
    )

def _failure_fields(error: BaseException) -> Dict[str, Any]:
    return {'error_type': type(error).__name__, 'error_message': str(error)}

class LogContext:
    """Logs the start and end of an operation with its context fields"""

    def __init__(self, logger: logging.Logger, **context):
        self.logger = logger
        self.context = context
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.info("Operation started", extra=log_fields(**self.context))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        fields = {**self.context, 'duration_seconds': round(time.perf_counter() - self.start_time, 3)}

        if exc_type is None:
            self.logger.info("Operation completed", extra=log_fields(**fields))
        else:
            fields.update(_failure_fields(exc_val))
            self.logger.error("Operation failed", extra=log_fields(**fields))

def performance_monitor(logger: Optional[logging.Logger] = None):
    """Decorator logging how long a call took and how memory moved"""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            func_logger = logger or logging.getLogger(func.__module__)
            start_time = time.perf_counter()
            start_memory = process_memory_mb()

            def elapsed() -> float:
                return round(time.perf_counter() - start_time, 3)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = elapsed()
                func_logger.error(
                    f"Function {func.__name__} failed after {duration}s",
                    extra=log_fields(function=func.__name__, duration_seconds=duration,
                                     status='error', **_failure_fields(e))
                )
                raise

            duration = elapsed()
            end_memory = process_memory_mb()
            func_logger.debug(
                f"Function {func.__name__} completed in {duration}s",
                extra=log_fields(function=func.__name__, duration_seconds=duration,
                                 memory_mb=round(end_memory, 1),
                                 memory_delta_mb=round(end_memory - start_memory, 1),
                                 status='success')
            )
            return result

        return wrapper
    return decorator
