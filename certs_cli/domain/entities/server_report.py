"""Server report entity."""

from dataclasses import dataclass, field

from ..value_objects import CertCategory
from .cert_entry import CertEntry


@dataclass(frozen=True, slots=True)
class ReportMeta:
    """Metadata stamped on a server report by the report generator."""

    checked_at_time: str = ""
    show_all: str = ""
    warn_before_date: str = ""
    warning_days: int = 0


@dataclass(frozen=True, slots=True)
class ServerReport:
    """Certificate inventory of one monitored server."""

    etcd: tuple[CertEntry, ...] = ()
    kubeconfigs: tuple[CertEntry, ...] = ()
    ocp_certs: tuple[CertEntry, ...] = ()
    registry: tuple[CertEntry, ...] = ()
    router: tuple[CertEntry, ...] = ()
    meta: ReportMeta = field(default_factory=ReportMeta)

    def entries(self, category: CertCategory) -> tuple[CertEntry, ...]:
        """Get the entries of a category, in document order."""
        return getattr(self, category.value)

    @property
    def total_entries(self) -> int:
        """Total entry count across all categories."""
        return sum(len(self.entries(category)) for category in CertCategory)
