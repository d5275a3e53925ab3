"""Core package - Scheduling policies, period filters and aggregation."""

from salon_scheduling.core.aggregation import overall_totals, weekly_performance, weekly_stats
from salon_scheduling.core.conflict_resolver import (
    ConflictResolver,
    get_conflict_resolver,
    resolve,
)
from salon_scheduling.core.errors import InvalidRequest
from salon_scheduling.core.period_filter import (
    default_custom_range,
    filter_by_period,
    filter_by_status,
)
from salon_scheduling.core.time_window import can_cancel, can_edit

__all__ = [
    "can_edit",
    "can_cancel",
    "filter_by_period",
    "filter_by_status",
    "default_custom_range",
    "ConflictResolver",
    "get_conflict_resolver",
    "resolve",
    "InvalidRequest",
    "weekly_stats",
    "overall_totals",
    "weekly_performance",
]
