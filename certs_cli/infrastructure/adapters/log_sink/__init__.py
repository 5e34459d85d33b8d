"""Logging adapters."""

from .setup import configure_logging
from .sink import LoggerReportSink

__all__ = ["LoggerReportSink", "configure_logging"]
