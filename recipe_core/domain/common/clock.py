"""
Domain time sources.

Aggregates never read the system time themselves. A clock is passed in
so construction stays deterministic under a fixed clock.
"""

from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local date-time, timezone-aware."""
    return datetime.now().astimezone()


def system_clock(timezone: str | None = None) -> Clock:
    """
    Build a clock reading the system time.

    Args:
        timezone: IANA zone name (e.g. "America/Sao_Paulo"). ``None``
            uses the local zone of the host.

    Returns:
        Clock returning timezone-aware date-times
    """
    if timezone is None:
        return local_now

    zone = ZoneInfo(timezone)

    def now() -> datetime:
        return datetime.now(zone)

    return now


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns the same moment."""

    def now() -> datetime:
        return moment

    return now
