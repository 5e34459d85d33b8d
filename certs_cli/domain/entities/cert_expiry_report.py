"""Certificate expiry report aggregate root."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .server_report import ServerReport


@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Summary counters as delivered by the report generator.

    These are carried through as-is and never recomputed.
    """

    expired: int = 0
    ok: int = 0
    total: int = 0
    warning: int = 0


@dataclass(frozen=True, slots=True)
class CertExpiryReport:
    """Aggregate root holding every server report of a run."""

    servers: Mapping[str, ServerReport] = field(default_factory=dict)
    summary: ReportSummary = field(default_factory=ReportSummary)

    @property
    def server_names(self) -> list[str]:
        """Server names in lexicographic order."""
        return sorted(self.servers)

    @property
    def total_entries(self) -> int:
        """Total entry count across all servers."""
        return sum(server.total_entries for server in self.servers.values())
