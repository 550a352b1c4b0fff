"""Wall-clock helpers.

All timestamps in the service are timezone-aware UTC. Services take a
``Clock`` so time-window checks can be driven from tests.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Clock:
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current aware UTC time."""
        return utc_now()
