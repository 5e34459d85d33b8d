"""Domain service for checking report freshness."""

import re
from collections.abc import Callable
from datetime import datetime, timedelta

from ..exceptions import TimestampParseError

CHECKED_AT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
# strptime accepts 1-6 fractional digits; the generator always writes six
CHECKED_AT_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6}", re.ASCII)


class StalenessChecker:
    """
    Domain service deciding whether a report's checked-at timestamp is too old.

    The report generator stamps naive local time, so the default clock is
    the naive local ``datetime.now``.
    """

    def __init__(
        self,
        max_age: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the checker.

        Args:
            max_age: Age above which a report is considered stale.
            clock: Callable returning the current time.
        """
        self._max_age = max_age
        self._clock = clock

    @staticmethod
    def parse_checked_at(value: str) -> datetime:
        """
        Parse a checked-at timestamp.

        Raises:
            TimestampParseError: If the value does not match the layout.
        """
        if not isinstance(value, str) or not CHECKED_AT_PATTERN.fullmatch(value):
            msg = f"expected layout {CHECKED_AT_FORMAT!r} with six fractional digits"
            raise TimestampParseError(msg)

        try:
            return datetime.strptime(value, CHECKED_AT_FORMAT)  # noqa: DTZ007
        except (TypeError, ValueError) as e:
            msg = f"expected layout {CHECKED_AT_FORMAT!r}: {e}"
            raise TimestampParseError(msg) from e

    def age(self, checked_at: datetime) -> timedelta:
        """Time elapsed since the report was generated."""
        return self._clock() - checked_at

    def is_stale(self, checked_at: datetime) -> bool:
        """Check if the report is older than the maximum age."""
        return self.age(checked_at) > self._max_age
