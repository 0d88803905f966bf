"""Reporting window helpers."""
from datetime import datetime, time, timedelta
from typing import Callable, Optional

from ..schemas.report import DateWindow


Clock = Callable[[], datetime]


def previous_day_window(now: Optional[datetime] = None) -> DateWindow:
    """Return yesterday's window relative to ``now`` (local time by default).

    The end boundary is 23:59:59.000, not 23:59:59.999.
    """
    if now is None:
        now = datetime.now()

    day = now.date() - timedelta(days=1)
    start = datetime.combine(day, time.min, tzinfo=now.tzinfo)
    end = start.replace(hour=23, minute=59, second=59)
    return DateWindow(start=start, end=end)
