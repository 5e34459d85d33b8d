"""Certificate entry entity."""

from dataclasses import dataclass

from ..value_objects import ExpiryThreshold


@dataclass(frozen=True, slots=True)
class CertEntry:
    """A single certificate observation from the expiry report."""

    cert_cn: str = ""
    days_remaining: int = 0
    expiry: str = ""
    health: str = ""
    path: str = ""
    serial: float = 0.0
    serial_hex: str = ""

    @property
    def is_expired(self) -> bool:
        """Check if the certificate has already expired."""
        return self.days_remaining < 0

    def expires_within(self, threshold: ExpiryThreshold) -> bool:
        """Check if the remaining validity is at or below the threshold."""
        return self.days_remaining <= threshold.days
