"""Domain value objects - Immutable objects defined by their attributes."""

from .cert_category import CertCategory
from .expiry_threshold import ExpiryThreshold
from .log_severity import LogSeverity

__all__ = [
    "CertCategory",
    "ExpiryThreshold",
    "LogSeverity",
]
