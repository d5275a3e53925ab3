"""Aggregation Engine - Weekly and overall statistics for reporting."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal

from salon_scheduling.config.policy import get_policy
from salon_scheduling.contracts.appointment import Appointment, AppointmentStatus
from salon_scheduling.contracts.reporting import (
    OverallTotals,
    WeeklyPerformance,
    WeeklyStat,
)
from salon_scheduling.core.boundaries import week_range, week_start_date, within
from salon_scheduling.utils.logger import get_logger

logger = get_logger(__name__)

WEEK_LABEL_FORMAT = "%d %b"

# Whether an appointment counts toward revenue and appointment totals.
# Every status must be listed.
COUNTS_TOWARD_TOTALS: dict[AppointmentStatus, bool] = {
    AppointmentStatus.PENDING: True,
    AppointmentStatus.CONFIRMED: True,
    AppointmentStatus.DONE: True,
    AppointmentStatus.CANCELED: False,
}


def counts_toward_totals(appointment: Appointment) -> bool:
    return COUNTS_TOWARD_TOTALS[appointment.status]


def week_label(week_start: date) -> str:
    """Short display label of a week bucket, e.g. "09 Jun"."""
    return week_start.strftime(WEEK_LABEL_FORMAT)


def _local_date(moment: datetime, tz: tzinfo | None) -> date:
    return (moment.astimezone(tz) if tz is not None else moment).date()


def weekly_stats(
    appointments: Iterable[Appointment],
    *,
    window: int | None = None,
    week_start: int | None = None,
    tz: tzinfo | None = None,
) -> list[WeeklyStat]:
    """Bucket non-canceled appointments by week.

    Args:
        appointments: Appointments to aggregate.
        window: How many of the most recent weeks to keep. Configured
            policy (8 weeks) when omitted.
        week_start: First weekday of the week. Configured policy
            (Sunday) when omitted.
        tz: Timezone used to read the appointment date. Each appointment's
            own offset when omitted.

    Returns:
        At most ``window`` stats, ascending by week start date.
    """
    policy = get_policy()
    window = policy.weekly_stats_window if window is None else window
    week_start = policy.week_start if week_start is None else week_start

    buckets: dict[date, WeeklyStat] = {}

    for ap in appointments:
        if not counts_toward_totals(ap):
            continue

        key = week_start_date(_local_date(ap.scheduled_at, tz), week_start)
        stat = buckets.get(key)
        if stat is None:
            stat = WeeklyStat(week_start=key, week_label=week_label(key))
            buckets[key] = stat

        stat.appointment_count += 1
        stat.revenue_total += ap.total_price
        stat.service_count += ap.service_count

    ordered = [buckets[key] for key in sorted(buckets)]
    recent = ordered[-window:] if window > 0 else []
    logger.debug("weekly_stats_computed", buckets=len(ordered), returned=len(recent))
    return recent


def overall_totals(appointments: Iterable[Appointment]) -> OverallTotals:
    """Compute dashboard totals.

    Revenue and appointment count skip canceled appointments. The
    average duration is taken over every appointment, canceled included,
    and is 0 for an empty collection.
    """
    items = list(appointments)
    counted = [ap for ap in items if counts_toward_totals(ap)]

    total_duration = sum(ap.total_duration for ap in items)
    average = total_duration / len(items) if items else 0.0

    return OverallTotals(
        total_revenue=sum((ap.total_price for ap in counted), Decimal("0")),
        total_appointment_count=len(counted),
        pending_count=sum(1 for ap in items if ap.status is AppointmentStatus.PENDING),
        average_duration=average,
    )


def weekly_performance(
    appointments: Iterable[Appointment],
    now: datetime,
    *,
    week_start: int | None = None,
) -> WeeklyPerformance:
    """Count this week's appointments and how many were completed.

    Args:
        appointments: Appointments to inspect, any status.
        now: Current instant, supplied by the caller.
        week_start: First weekday of the week. Configured policy
            (Sunday) when omitted.

    Returns:
        Totals for the week containing ``now``.
    """
    if week_start is None:
        week_start = get_policy().week_start

    bounds = week_range(now, week_start)
    in_week = [ap for ap in appointments if within(ap.scheduled_at, bounds)]
    start = bounds[0].date()

    return WeeklyPerformance(
        week_start=start,
        week_end=start + timedelta(days=6),
        total_count=len(in_week),
        completed_count=sum(1 for ap in in_week if ap.status is AppointmentStatus.DONE),
    )
