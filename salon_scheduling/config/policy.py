"""Scheduling Policy - Named business constants and their validated bundle."""

import calendar
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from salon_scheduling.config.settings import Settings, get_settings

# Minimum notice required to edit an appointment
EDIT_LEAD_TIME = timedelta(days=2)

# First day of the week, Python numbering (Monday=0 ... Sunday=6)
WEEK_START = calendar.SUNDAY

# Number of most recent week buckets kept by weekly_stats
WEEKLY_STATS_WINDOW = 8

# Length of the pre-filled custom reporting range, in days
DEFAULT_CUSTOM_RANGE_DAYS = 7


class SchedulingPolicy(BaseModel):
    """Business constants used by the scheduling core.

    Defaults mirror the module constants. Tests and callers can build
    alternate policies without touching the policy logic.
    """

    edit_lead_time: timedelta = Field(
        default=EDIT_LEAD_TIME,
        description="Minimum notice before an appointment can no longer be edited",
    )
    week_start: int = Field(
        default=WEEK_START,
        ge=calendar.MONDAY,
        le=calendar.SUNDAY,
        description="First day of the week (Monday=0 ... Sunday=6)",
    )
    weekly_stats_window: int = Field(
        default=WEEKLY_STATS_WINDOW,
        ge=1,
        description="Number of most recent weeks reported by weekly_stats",
    )
    default_custom_range_days: int = Field(
        default=DEFAULT_CUSTOM_RANGE_DAYS,
        ge=0,
        description="Days covered by the default custom reporting range",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SchedulingPolicy":
        """Build a policy from environment settings.

        Args:
            settings: Settings to read. Uses the cached settings if omitted.

        Returns:
            Policy carrying the configured constants.
        """
        settings = settings or get_settings()
        return cls(
            edit_lead_time=timedelta(days=settings.edit_lead_time_days),
            week_start=settings.week_start_day,
            weekly_stats_window=settings.weekly_stats_window,
            default_custom_range_days=settings.default_custom_range_days,
        )


DEFAULT_POLICY = SchedulingPolicy()


def get_policy() -> SchedulingPolicy:
    """Policy configured from the cached settings.

    Every component resolves its omitted policy arguments through this
    function, so one environment override applies everywhere.
    """
    return SchedulingPolicy.from_settings(get_settings())
