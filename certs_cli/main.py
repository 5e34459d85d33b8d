"""
certs-cli

Composition root and application entry point.
Parses the command line, wires the adapters and runs a single reporting pass.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .application.exceptions import ApplicationError, ConfigurationError
from .application.use_cases import PrintExpiringCertificates
from .infrastructure.adapters import (
    JsonFileReportRepository,
    LoggerReportSink,
    configure_logging,
)
from .infrastructure.config import Settings, parse_settings

if TYPE_CHECKING:
    from .application.use_cases import RunResult

logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_report_repository(self) -> JsonFileReportRepository:
        """Create the report repository adapter."""
        return JsonFileReportRepository(self._settings.report_file)

    def create_report_sink(self) -> LoggerReportSink:
        """Create the report sink adapter."""
        return LoggerReportSink()

    def create_print_use_case(self) -> PrintExpiringCertificates:
        """Create the main use case with all dependencies."""
        return PrintExpiringCertificates(
            report_repository=self.create_report_repository(),
            sink=self.create_report_sink(),
            threshold=self._settings.threshold,
        )


class Application:
    """Main application orchestrator."""

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    def run_once(self) -> RunResult:
        """Execute a single reporting pass."""
        logger.debug(
            "Parsing JSON @ %s. Expiry is set to %d days.",
            self._settings.report_file,
            self._settings.expiry_days,
        )
        result = self._container.create_print_use_case().execute()
        logger.debug(
            "Reported %d of %d certificates (%d expired) across %d servers",
            result.entries_reported,
            result.total_entries,
            result.entries_expired,
            result.servers_checked,
        )
        return result

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code (0 for a completed pass, 1 for failure).
        """
        try:
            self.run_once()
        except ApplicationError as e:
            logger.error("%s", e)  # noqa: TRY400
            return 1
        return 0


def run(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the application."""
    try:
        settings = parse_settings(argv)
    except ConfigurationError as e:
        configure_logging()
        logger.error("Configuration error: %s", e)  # noqa: TRY400
        return 1

    configure_logging(debug=settings.debug, syslog_ident=settings.syslog_ident)

    try:
        return Application(settings).run()
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    sys.exit(run())
