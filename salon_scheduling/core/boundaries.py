"""Date Boundaries - Day, week and month limits shared by the policies.

Every boundary is computed in the timezone of the reference datetime it is
derived from, so "midnight" always means local midnight for the caller.
"""

import calendar
from datetime import date, datetime, time, timedelta, tzinfo

from salon_scheduling.config.policy import WEEK_START

Bounds = tuple[datetime, datetime]


def start_of_day(moment: datetime) -> datetime:
    """Local midnight of the moment's date."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """Last representable instant (23:59:59.999999) of the moment's date."""
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)


def week_start_date(day: date, week_start: int = WEEK_START) -> date:
    """First day of the week containing ``day``.

    Args:
        day: Any calendar date.
        week_start: First weekday of the week, Python numbering
            (Monday=0 ... Sunday=6).

    Returns:
        The latest ``week_start`` weekday on or before ``day``.
    """
    return day - timedelta(days=(day.weekday() - week_start) % 7)


def week_range(moment: datetime, week_start: int = WEEK_START) -> Bounds:
    """Inclusive bounds of the seven-day week containing ``moment``."""
    first_day = week_start_date(moment.date(), week_start)
    start = datetime.combine(first_day, time.min, tzinfo=moment.tzinfo)
    return start, end_of_day(start + timedelta(days=6))


def month_range(moment: datetime) -> Bounds:
    """Inclusive bounds of the calendar month containing ``moment``."""
    last_day = calendar.monthrange(moment.year, moment.month)[1]
    start = start_of_day(moment.replace(day=1))
    return start, end_of_day(moment.replace(day=last_day))


def day_range(start_date: date, end_date: date, tz: tzinfo | None) -> Bounds:
    """Inclusive local-day bounds of a pair of calendar dates."""
    start = datetime.combine(start_date, time.min, tzinfo=tz)
    end = datetime.combine(end_date, time.max, tzinfo=tz)
    return start, end


def within(moment: datetime, bounds: Bounds) -> bool:
    """Check ``start <= moment <= end`` (both bounds inclusive)."""
    start, end = bounds
    return start <= moment <= end
