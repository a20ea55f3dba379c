"""
Time source for lifecycle events.

Every timestamped record reads "now" from a Clock instead of the wall clock
directly, so tests can inject deterministic instants.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)
