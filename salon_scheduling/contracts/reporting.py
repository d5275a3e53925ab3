"""Reporting Contract - Period selectors and derived statistics."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ReportingPeriod(str, Enum):
    """Named reporting periods."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "ReportingPeriod | str | None") -> "ReportingPeriod":
        """Parse a period selector, falling back to ALL for unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.ALL
        return cls.ALL


class DateRange(BaseModel):
    """Inclusive range of calendar dates for the custom period.

    Either bound may be missing; an incomplete range means "no filtering".
    """

    start_date: date | None = Field(
        default=None,
        description="First day included",
    )
    end_date: date | None = Field(
        default=None,
        description="Last day included",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_complete(self) -> bool:
        """Check if both bounds are present."""
        return self.start_date is not None and self.end_date is not None


class WeeklyStat(BaseModel):
    """Aggregates of one week bucket."""

    week_start: date = Field(
        ...,
        description="First day of the week bucket",
    )
    week_label: str = Field(
        ...,
        description="Short display label (day + abbreviated month)",
    )
    appointment_count: int = Field(default=0, ge=0)
    revenue_total: Decimal = Field(default=Decimal("0"), ge=0)
    service_count: int = Field(default=0, ge=0)


class OverallTotals(BaseModel):
    """Totals over a whole appointment collection."""

    total_revenue: Decimal = Field(
        default=Decimal("0"),
        description="Revenue of non-canceled appointments",
    )
    total_appointment_count: int = Field(
        default=0,
        description="Number of non-canceled appointments",
    )
    pending_count: int = Field(
        default=0,
        description="Number of PENDING appointments",
    )
    average_duration: float = Field(
        default=0.0,
        description="Mean duration in minutes over all appointments",
    )


class WeeklyPerformance(BaseModel):
    """Activity of the week containing a reference instant."""

    week_start: date
    week_end: date
    total_count: int = Field(default=0, ge=0)
    completed_count: int = Field(default=0, ge=0)
