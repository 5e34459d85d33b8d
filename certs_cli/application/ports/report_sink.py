"""Port for report output - driven/secondary port."""

from typing import Protocol

from ...domain.value_objects import LogSeverity


class ReportSink(Protocol):
    """
    Port for emitting leveled report lines.

    Lines are passed as a printf-style template plus its arguments so the
    sink decides how (and whether) to render them.
    """

    def emit(self, severity: LogSeverity, template: str, *args: object) -> None:
        """
        Emit a single report line.

        Args:
            severity: Severity of the line.
            template: printf-style message template.
            *args: Values for the template placeholders.
        """
        ...
