"""JSON report file adapter."""

from .repository import JsonFileReportRepository

__all__ = ["JsonFileReportRepository"]
