"""Appointment Contract - Services, statuses and appointments."""

from decimal import Decimal
from enum import Enum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class AppointmentStatus(str, Enum):
    """Closed set of appointment statuses.

    PENDING and CONFIRMED are open; DONE and CANCELED are terminal.
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DONE = "DONE"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        """Check if no further edit or cancel is possible."""
        return self in (AppointmentStatus.DONE, AppointmentStatus.CANCELED)


class Service(BaseModel):
    """Catalog item with a fixed price and duration."""

    id: int = Field(
        ...,
        description="Unique service ID",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Display name",
    )
    price: Decimal = Field(
        ...,
        ge=0,
        description="Price of the service",
    )
    duration_minutes: int = Field(
        ...,
        gt=0,
        description="Duration in minutes",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Corte",
                "price": "50.00",
                "duration_minutes": 30,
            }
        },
    )


def sum_prices(services: list[Service]) -> Decimal:
    """Total price of a list of services (duplicates counted)."""
    return sum((service.price for service in services), Decimal("0"))


def sum_durations(services: list[Service]) -> int:
    """Total duration in minutes of a list of services."""
    return sum(service.duration_minutes for service in services)


class Appointment(BaseModel):
    """A scheduled visit bundling one or more services.

    The embedded services are a snapshot: later catalog edits do not
    affect them. Totals are always derived from the current service list.
    """

    id: int = Field(
        ...,
        description="Unique appointment ID",
    )
    owning_customer_id: int = Field(
        ...,
        description="ID of the customer that owns the appointment",
    )
    scheduled_at: AwareDatetime = Field(
        ...,
        description="Date and time of the visit",
    )
    status: AppointmentStatus = Field(
        default=AppointmentStatus.PENDING,
        description="Current status",
    )
    services: list[Service] = Field(
        default_factory=list,
        description="Services booked for the visit",
    )
    created_at: AwareDatetime | None = Field(
        default=None,
        description="Creation timestamp",
    )
    updated_at: AwareDatetime | None = Field(
        default=None,
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 10,
                "owning_customer_id": 3,
                "scheduled_at": "2024-06-10T14:00:00-03:00",
                "status": "CONFIRMED",
                "services": [
                    {"id": 1, "name": "Corte", "price": "50.00", "duration_minutes": 30}
                ],
            }
        },
    )

    @property
    def total_price(self) -> Decimal:
        """Sum of the prices of all services."""
        return sum_prices(self.services)

    @property
    def total_duration(self) -> int:
        """Sum of the durations of all services, in minutes."""
        return sum_durations(self.services)

    @property
    def service_count(self) -> int:
        """Number of services, duplicates included."""
        return len(self.services)

    @property
    def is_terminal(self) -> bool:
        """Check if the appointment is DONE or CANCELED."""
        return self.status.is_terminal
