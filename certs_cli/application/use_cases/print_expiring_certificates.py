"""Use case for printing certificates close to their expiry."""

import logging
from dataclasses import dataclass

from ...domain.entities import CertEntry, CertExpiryReport, ServerReport
from ...domain.exceptions import TimestampParseError
from ...domain.services import ExpiryClassifier, StalenessChecker
from ...domain.value_objects import CertCategory, ExpiryThreshold, LogSeverity
from ..ports import ReportRepository, ReportSink

logger = logging.getLogger(__name__)

ENTRY_TEMPLATE = "%d days left until %s for %s @ %s: %s"
STALE_TEMPLATE = "Report for %s is %.1f days old (checked at %s)."
UNPARSEABLE_TEMPLATE = "Can't parse report timestamp %r for %s (%s)."

SECONDS_PER_DAY = 86400


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of a single reporting pass."""

    servers_checked: int
    entries_reported: int
    entries_debug: int
    entries_expired: int = 0
    stale_servers: tuple[str, ...] = ()
    unparseable_servers: tuple[str, ...] = ()

    @property
    def total_entries(self) -> int:
        """Number of entries that produced a line."""
        return self.entries_reported + self.entries_debug


class PrintExpiringCertificates:
    """
    Use case for reporting every certificate of an expiry report.

    Each entry yields exactly one line: info level when it expires within
    the threshold, debug level otherwise.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        sink: ReportSink,
        threshold: ExpiryThreshold,
        *,
        staleness_checker: StalenessChecker | None = None,
    ) -> None:
        """
        Initialize the use case.

        Args:
            report_repository: Adapter for loading the report.
            sink: Adapter receiving the report lines.
            threshold: Expiry threshold configuration.
            staleness_checker: Checker for the per-server report timestamp.
        """
        self._repository = report_repository
        self._sink = sink
        self._classifier = ExpiryClassifier(threshold)
        self._staleness = staleness_checker or StalenessChecker()

    def execute(self) -> RunResult:
        """
        Execute the reporting pass.

        Returns:
            RunResult with per-severity counts.

        Raises:
            FileAccessError: If the report cannot be read.
            DecodeError: If the report cannot be decoded.
        """
        report = self._repository.load()
        self._log_summary(report)

        reported = 0
        debug = 0
        expired = 0
        stale: list[str] = []
        unparseable: list[str] = []

        for name in report.server_names:
            server = report.servers[name]

            try:
                if self._check_staleness(name, server):
                    stale.append(name)
            except TimestampParseError as e:
                unparseable.append(name)
                self._sink.emit(
                    LogSeverity.WARNING, UNPARSEABLE_TEMPLATE, server.meta.checked_at_time, name, e
                )

            for category in CertCategory:
                entries = server.entries(category)
                logger.debug("Checking %d %s entries @ %s", len(entries), category.display_name, name)
                for entry in entries:
                    if self._report_entry(entry, name) is LogSeverity.INFO:
                        reported += 1
                    else:
                        debug += 1
                    if entry.is_expired:
                        expired += 1

        return RunResult(
            servers_checked=len(report.servers),
            entries_reported=reported,
            entries_debug=debug,
            entries_expired=expired,
            stale_servers=tuple(stale),
            unparseable_servers=tuple(unparseable),
        )

    def _check_staleness(self, name: str, server: ServerReport) -> bool:
        """Emit an error line if the server's report is stale."""
        checked_at = self._staleness.parse_checked_at(server.meta.checked_at_time)
        if not self._staleness.is_stale(checked_at):
            return False

        days_old = self._staleness.age(checked_at).total_seconds() / SECONDS_PER_DAY
        self._sink.emit(LogSeverity.ERROR, STALE_TEMPLATE, name, days_old, server.meta.checked_at_time)
        return True

    def _report_entry(self, entry: CertEntry, server_name: str) -> LogSeverity:
        """Emit the line for one certificate entry."""
        severity = self._classifier.classify(entry)
        self._sink.emit(
            severity,
            ENTRY_TEMPLATE,
            entry.days_remaining,
            entry.expiry,
            entry.path,
            server_name,
            entry.cert_cn,
        )
        return severity

    def _log_summary(self, report: CertExpiryReport) -> None:
        """Log the generator's summary counters as delivered."""
        summary = report.summary
        logger.debug(
            "Loaded report for %d servers (%d entries), generator summary: "
            "total=%d ok=%d warning=%d expired=%d",
            len(report.servers),
            report.total_entries,
            summary.total,
            summary.ok,
            summary.warning,
            summary.expired,
        )
