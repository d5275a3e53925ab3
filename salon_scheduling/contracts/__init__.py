"""Contracts package - Pydantic schemas for the scheduling core."""

from salon_scheduling.contracts.appointment import Appointment, AppointmentStatus, Service
from salon_scheduling.contracts.decision import (
    BookingRequest,
    CreateNew,
    Decision,
    Merge,
    PolicyDecision,
)
from salon_scheduling.contracts.reporting import (
    DateRange,
    OverallTotals,
    ReportingPeriod,
    WeeklyPerformance,
    WeeklyStat,
)

__all__ = [
    "Service",
    "Appointment",
    "AppointmentStatus",
    "PolicyDecision",
    "BookingRequest",
    "Merge",
    "CreateNew",
    "Decision",
    "ReportingPeriod",
    "DateRange",
    "WeeklyStat",
    "OverallTotals",
    "WeeklyPerformance",
]
