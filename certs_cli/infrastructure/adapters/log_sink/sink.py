"""Report sink backed by the standard logging module."""

from __future__ import annotations

import logging

from ....domain.value_objects import LogSeverity

REPORT_LOGGER_NAME = "certs_cli.report"


class LoggerReportSink:
    """
    Report sink writing each line as a log record.

    Implements the ReportSink port.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the sink with the logger to write to."""
        self._logger = logger or logging.getLogger(REPORT_LOGGER_NAME)

    def emit(self, severity: LogSeverity, template: str, *args: object) -> None:
        """Log one report line at the matching level."""
        # stacklevel=2 attributes the record to the emitting use case method
        self._logger.log(severity.level, template, *args, stacklevel=2)
