"""Infrastructure adapters - Implementations of application ports."""

from .log_sink import LoggerReportSink, configure_logging
from .report_file import JsonFileReportRepository

__all__ = [
    "JsonFileReportRepository",
    "LoggerReportSink",
    "configure_logging",
]
