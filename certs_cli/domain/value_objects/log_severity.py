"""Log severity value object."""

import logging
from enum import StrEnum, auto


class LogSeverity(StrEnum):
    """Severity of a reported line."""

    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def level(self) -> int:
        """Matching stdlib logging level."""
        match self:
            case LogSeverity.DEBUG:
                return logging.DEBUG
            case LogSeverity.INFO:
                return logging.INFO
            case LogSeverity.WARNING:
                return logging.WARNING
            case LogSeverity.ERROR:
                return logging.ERROR
