"""Application ports - Interfaces for external adapters."""

from .report_repository import ReportRepository
from .report_sink import ReportSink

__all__ = [
    "ReportRepository",
    "ReportSink",
]
