"""Decision Contracts - Structured results of the scheduling policies.

Policy predicates answer with a ``PolicyDecision`` instead of raising.
The conflict resolver answers with a tagged ``Decision``:
- ``Merge``: fold the request into an existing same-week appointment
- ``CreateNew``: book a standalone appointment
"""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from salon_scheduling.contracts.appointment import (
    Appointment,
    Service,
    sum_durations,
    sum_prices,
)


class PolicyDecision(BaseModel):
    """Allowed/denied answer with an explanation when denied."""

    allowed: bool = Field(..., description="Whether the action is permitted")
    reason: str | None = Field(
        default=None,
        description="Why the action is not permitted",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def allow(cls) -> "PolicyDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "PolicyDecision":
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed


class BookingRequest(BaseModel):
    """Validated booking request handed to the conflict resolver."""

    customer_id: int | None = Field(
        default=None,
        description="Requesting customer; None skips the ownership check",
    )
    requested_date: AwareDatetime = Field(
        ...,
        description="Requested date and time (ISO-8601 with offset accepted)",
    )
    requested_services: list[Service] = Field(
        ...,
        min_length=1,
        description="Services to book, at least one",
    )

    model_config = ConfigDict(frozen=True)


class Merge(BaseModel):
    """Proposal to add the requested services to an existing appointment."""

    kind: Literal["merge"] = "merge"
    target: Appointment = Field(..., description="Same-week appointment to merge into")
    added_services: list[Service] = Field(..., description="Requested services")
    requested_date: AwareDatetime = Field(
        ...,
        description="Originally requested date, kept for a rejected merge",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def merged_services(self) -> list[Service]:
        """Existing services followed by the added ones, duplicates kept."""
        return [*self.target.services, *self.added_services]

    @property
    def merged_total_price(self) -> Decimal:
        return sum_prices(self.merged_services)

    @property
    def merged_total_duration(self) -> int:
        return sum_durations(self.merged_services)


class CreateNew(BaseModel):
    """Decision to book a new standalone appointment."""

    kind: Literal["create_new"] = "create_new"
    date: AwareDatetime = Field(..., description="Date of the new appointment")
    services: list[Service] = Field(..., description="Services of the new appointment")

    model_config = ConfigDict(frozen=True)

    @property
    def total_price(self) -> Decimal:
        return sum_prices(self.services)

    @property
    def total_duration(self) -> int:
        return sum_durations(self.services)


Decision = Annotated[Merge | CreateNew, Field(discriminator="kind")]
