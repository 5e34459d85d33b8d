"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class TimestampParseError(DomainError):
    """Raised when a report timestamp does not match the expected layout."""
