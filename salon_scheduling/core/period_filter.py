"""Period Filter - Select the appointments of a reporting period.

Filters keep the input order and never raise on a malformed selector:
anything they do not understand behaves like "all".
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from salon_scheduling.config.policy import get_policy
from salon_scheduling.contracts.appointment import Appointment, AppointmentStatus
from salon_scheduling.contracts.reporting import DateRange, ReportingPeriod
from salon_scheduling.core.boundaries import (
    Bounds,
    day_range,
    end_of_day,
    month_range,
    start_of_day,
    week_range,
    within,
)
from salon_scheduling.utils.logger import get_logger

logger = get_logger(__name__)

ALL_STATUSES = "all"


def period_bounds(
    period: ReportingPeriod | str | None,
    now: datetime,
    custom_range: DateRange | None = None,
    *,
    week_start: int | None = None,
) -> Bounds | None:
    """Compute the inclusive bounds of a reporting period.

    Args:
        period: Period selector. Unknown values mean "all".
        now: Reference instant; its timezone defines local days.
        custom_range: Dates for the custom period.
        week_start: First weekday of the week. Configured policy
            (Sunday) when omitted.

    Returns:
        ``(start, end)`` or None when no filtering applies.
    """
    selected = ReportingPeriod.parse(period)

    if selected is ReportingPeriod.TODAY:
        return start_of_day(now), end_of_day(now)

    if selected is ReportingPeriod.WEEK:
        if week_start is None:
            week_start = get_policy().week_start
        return week_range(now, week_start)

    if selected is ReportingPeriod.MONTH:
        return month_range(now)

    if selected is ReportingPeriod.CUSTOM:
        if custom_range is None:
            return None
        if custom_range.start_date is None or custom_range.end_date is None:
            return None
        return day_range(custom_range.start_date, custom_range.end_date, now.tzinfo)

    return None


def filter_by_period(
    appointments: Iterable[Appointment],
    period: ReportingPeriod | str | None,
    now: datetime,
    custom_range: DateRange | None = None,
    *,
    week_start: int | None = None,
) -> list[Appointment]:
    """Keep the appointments scheduled inside a reporting period.

    Args:
        appointments: Appointments to filter.
        period: all, today, week, month or custom.
        now: Current instant, supplied by the caller.
        custom_range: Inclusive dates, used only by the custom period.
        week_start: First weekday of the week. Configured policy
            (Sunday) when omitted.

    Returns:
        Matching appointments in their original order. The whole input
        when the period is "all", unknown, or an incomplete custom range.
    """
    items = list(appointments)
    bounds = period_bounds(period, now, custom_range, week_start=week_start)
    if bounds is None:
        return items

    selected = [ap for ap in items if within(ap.scheduled_at, bounds)]
    logger.debug(
        "period_filter_applied",
        period=str(period),
        start=bounds[0].isoformat(),
        end=bounds[1].isoformat(),
        total=len(items),
        selected=len(selected),
    )
    return selected


def filter_by_status(
    appointments: Iterable[Appointment],
    status: AppointmentStatus | str | None,
) -> list[Appointment]:
    """Keep the appointments with a given status.

    "all", None and unknown values select everything.
    """
    items = list(appointments)
    if status is None or status == ALL_STATUSES:
        return items
    if not isinstance(status, str):
        logger.debug("status_filter_ignored", status=repr(status))
        return items
    try:
        wanted = AppointmentStatus(status.strip().upper())
    except ValueError:
        logger.debug("status_filter_ignored", status=str(status))
        return items
    return [ap for ap in items if ap.status is wanted]


def default_custom_range(
    today: date,
    *,
    days: int | None = None,
) -> DateRange:
    """Initial custom range: the last ``days`` days up to ``today``.

    ``days`` defaults to the configured policy (7 days).
    """
    if days is None:
        days = get_policy().default_custom_range_days
    return DateRange(start_date=today - timedelta(days=days), end_date=today)
