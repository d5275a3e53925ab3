"""Time Window Policy - Edit and cancel eligibility of an appointment.

Both predicates are pure: they take the current instant explicitly and
answer with a ``PolicyDecision`` instead of raising.
"""

from datetime import datetime, timedelta

from salon_scheduling.config.policy import get_policy
from salon_scheduling.contracts.appointment import AppointmentStatus
from salon_scheduling.contracts.decision import PolicyDecision
from salon_scheduling.utils.logger import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Cancel eligibility per status; every status must be listed
CANCEL_RULES: dict[AppointmentStatus, PolicyDecision] = {
    AppointmentStatus.PENDING: PolicyDecision.allow(),
    AppointmentStatus.CONFIRMED: PolicyDecision.allow(),
    AppointmentStatus.DONE: PolicyDecision.deny("cannot cancel a completed appointment"),
    AppointmentStatus.CANCELED: PolicyDecision.deny("appointment is already canceled"),
}


def _format_days(lead_time: timedelta) -> str:
    days = lead_time.total_seconds() / SECONDS_PER_DAY
    return f"{days:g} day" if days == 1 else f"{days:g} days"


def can_edit(
    scheduled_at: datetime,
    now: datetime,
    *,
    lead_time: timedelta | None = None,
) -> PolicyDecision:
    """Check if an appointment can still be edited.

    Editing requires at least ``lead_time`` of notice. The difference is
    compared exactly (fractional days, never floored), so an appointment
    exactly ``lead_time`` away is still editable.

    Args:
        scheduled_at: When the appointment takes place.
        now: Current instant, supplied by the caller.
        lead_time: Minimum notice. Defaults to the configured policy
            (two days unless EDIT_LEAD_TIME_DAYS overrides it).

    Returns:
        Allowed decision, or a denial with the reason.
    """
    if lead_time is None:
        lead_time = get_policy().edit_lead_time

    notice = scheduled_at - now
    if notice >= lead_time:
        return PolicyDecision.allow()

    logger.debug(
        "edit_window_closed",
        scheduled_at=scheduled_at.isoformat(),
        notice_days=notice.total_seconds() / SECONDS_PER_DAY,
    )
    return PolicyDecision.deny(
        f"cannot edit appointments with less than {_format_days(lead_time)}' notice"
    )


def can_cancel(status: AppointmentStatus) -> PolicyDecision:
    """Check if an appointment in ``status`` can be canceled.

    There is no time restriction on cancellation, only a status one.

    Args:
        status: Current appointment status.

    Returns:
        Allowed decision, or a denial with the reason.
    """
    return CANCEL_RULES[AppointmentStatus(status)]
