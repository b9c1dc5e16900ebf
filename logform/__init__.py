"""Composable formats for log records: the LogInfo record, level tables and formats to chain."""

__version__ = "0.6.2"