"""Domain service for classifying certificate entries."""

from ..entities import CertEntry
from ..value_objects import ExpiryThreshold, LogSeverity


class ExpiryClassifier:
    """Domain service choosing the severity a certificate entry is reported at."""

    def __init__(self, threshold: ExpiryThreshold) -> None:
        """Initialize classifier with the expiry threshold."""
        self._threshold = threshold

    def classify(self, entry: CertEntry) -> LogSeverity:
        """
        Classify a certificate entry.

        Entries at or below the threshold (including already expired ones)
        are reported at info level, all others at debug level.

        Args:
            entry: Certificate entry to classify.

        Returns:
            Severity the entry should be reported at.
        """
        if entry.expires_within(self._threshold):
            return LogSeverity.INFO
        return LogSeverity.DEBUG
