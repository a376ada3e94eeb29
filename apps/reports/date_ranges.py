"""
Calendar-day windows and report range resolution.

Every day boundary used by the reports and the status snapshots comes from
here, computed in the server's configured TIME_ZONE. Callers always pass
``now`` explicitly; nothing in this module reads the clock.

Range tokens:
- day:   since midnight yesterday (pending report) / since midnight today
         (employee history)
- week:  since midnight 7 days ago
- month: since midnight 30 days ago
- anything else falls back to week
"""

from datetime import time, timedelta

from django.utils import timezone


RANGE_DAY = 'day'
RANGE_WEEK = 'week'
RANGE_MONTH = 'month'

# Days looked back from "now" before truncating to midnight
PENDING_REPORT_LOOKBACK = {
    RANGE_DAY: 1,
    RANGE_WEEK: 7,
    RANGE_MONTH: 30,
}

HISTORY_LOOKBACK = {
    RANGE_DAY: 0,
    RANGE_WEEK: 7,
    RANGE_MONTH: 30,
}

DEFAULT_RANGE = RANGE_WEEK


def local_day(instant):
    """Calendar date of ``instant`` in the server's time zone."""
    return timezone.localtime(instant).date()


def start_of_day(now):
    """Local midnight (00:00:00.000000) of the day containing ``now``."""
    local_now = timezone.localtime(now)
    return local_now.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(now):
    """Last representable instant (23:59:59.999999) of the day containing ``now``."""
    local_now = timezone.localtime(now)
    return local_now.replace(
        hour=time.max.hour,
        minute=time.max.minute,
        second=time.max.second,
        microsecond=time.max.microsecond,
    )


def day_window(now):
    """Return ``(start, end)`` of the local calendar day containing ``now``."""
    return start_of_day(now), end_of_day(now)


def _range_start(range_token, now, lookback):
    days = lookback.get(range_token, lookback[DEFAULT_RANGE])
    return start_of_day(timezone.localtime(now) - timedelta(days=days))


def resolve_range_start(range_token, now):
    """
    Start instant for the pending-work report.

    ``day`` looks back to the start of *yesterday* so the daily report covers
    one full day. Unknown or missing tokens silently resolve as ``week``.
    """
    return _range_start(range_token, now, PENDING_REPORT_LOOKBACK)


def resolve_history_start(range_token, now):
    """
    Start instant for a manager's view of one employee's history.

    Same as :func:`resolve_range_start` except ``day`` means "today".
    """
    return _range_start(range_token, now, HISTORY_LOOKBACK)
