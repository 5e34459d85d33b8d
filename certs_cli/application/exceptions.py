"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class FileAccessError(ApplicationError):
    """Raised when the report file cannot be read."""


class DecodeError(ApplicationError):
    """Raised when the report file is not a valid certificate expiry report."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
