"""Domain entities - Objects decoded from the certificate expiry report."""

from .cert_entry import CertEntry
from .cert_expiry_report import CertExpiryReport, ReportSummary
from .server_report import ReportMeta, ServerReport

__all__ = [
    "CertEntry",
    "CertExpiryReport",
    "ReportMeta",
    "ReportSummary",
    "ServerReport",
]
