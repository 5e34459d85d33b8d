"""Port for report repository - driven/secondary port."""

from typing import Protocol

from ...domain.entities import CertExpiryReport


class ReportRepository(Protocol):
    """
    Port for loading the certificate expiry report.

    This is a driven (secondary) port that defines how the application
    obtains the report produced by the external expiry playbook.
    """

    def load(self) -> CertExpiryReport:
        """
        Load the certificate expiry report.

        Returns:
            The decoded report.

        Raises:
            FileAccessError: If the report cannot be read.
            DecodeError: If the report cannot be decoded.
        """
        ...
