"""Application use cases."""

from .print_expiring_certificates import PrintExpiringCertificates, RunResult

__all__ = ["PrintExpiringCertificates", "RunResult"]
