"""
Weather Station Patterns
Observer, strategy, factory and decorator patterns around a fictional weather station
"""

__version__ = "1.0.0"
__author__ = "Weather Station Team"
