"""Concurrent checking of log files listed in a JSON configuration, with reports."""

__version__ = "0.1.0"