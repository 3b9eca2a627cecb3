# timing.py
# (entry, expiry) -> whole-day year fraction, plus input-boundary helpers.

from __future__ import annotations
import calendar
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from .config import DEFAULT_CONFIG, PricerConfig
from .errors import HorizonTooShortError, TimingError

__all__ = [
    "DAYS_PER_YEAR",
    "TimeToExpiry",
    "time_to_expiry",
    "parse_timestamp",
    "default_window",
]

DAYS_PER_YEAR = 365.0

_ONE_MS = timedelta(milliseconds=1)


class TimeToExpiry(NamedTuple):
    years: float    # whole days / 365
    hours: int      # whole hours elapsed
    days: int       # whole days elapsed


def time_to_expiry(
    period_start: datetime,
    expiry: datetime,
    config: Optional[PricerConfig] = None,
) -> TimeToExpiry:
    """Convert an (entry, expiry) pair into a year fraction.

    Each unit is floored before dividing down to the next one
    (ms -> s -> min -> h -> days), so any partial day is discarded and
    there is no calendar or leap-year adjustment.

    Raises
    ------
    HorizonTooShortError
        Fewer than ``config.min_horizon_hours`` whole hours separate the two
        instants (this includes expiry at or before entry).
    TimingError
        The instants cannot be compared (naive vs timezone-aware).
    """
    config = config or DEFAULT_CONFIG
    try:
        elapsed = expiry - period_start
    except TypeError as e:
        raise TimingError(f"cannot compare entry and expiry: {e}") from e

    whole_ms = elapsed // _ONE_MS
    whole_seconds = whole_ms // 1000
    whole_minutes = whole_seconds // 60
    whole_hours = whole_minutes // 60
    whole_days = whole_hours // 24

    if whole_hours < config.min_horizon_hours:
        raise HorizonTooShortError(whole_hours, config.min_horizon_hours)

    return TimeToExpiry(years=whole_days / DAYS_PER_YEAR, hours=whole_hours, days=whole_days)


# ---------------------------------------------------------------------------
# Input boundary
# ---------------------------------------------------------------------------
def parse_timestamp(value) -> Optional[datetime]:
    """Parse a 24-hour ISO-8601 timestamp (``YYYY-MM-DD HH:MM:SS``).

    Blank or unparseable text yields ``None`` so the validator reports the
    field as missing instead of failing somewhere downstream.
    """
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def default_window(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Default form values: entry *now*, expiry at the end of the current month."""
    start = now if now is not None else datetime.now()
    last_day = calendar.monthrange(start.year, start.month)[1]
    end = start.replace(day=last_day, hour=23, minute=59, second=59, microsecond=999_000)
    return start, end
