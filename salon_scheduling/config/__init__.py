"""Config package - Settings and scheduling policy constants."""

from salon_scheduling.config.policy import (
    DEFAULT_CUSTOM_RANGE_DAYS,
    DEFAULT_POLICY,
    EDIT_LEAD_TIME,
    WEEK_START,
    WEEKLY_STATS_WINDOW,
    SchedulingPolicy,
    get_policy,
)
from salon_scheduling.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "SchedulingPolicy",
    "get_policy",
    "DEFAULT_POLICY",
    "EDIT_LEAD_TIME",
    "WEEK_START",
    "WEEKLY_STATS_WINDOW",
    "DEFAULT_CUSTOM_RANGE_DAYS",
]
