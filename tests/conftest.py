"""Pytest Configuration - Shared fixtures for tests."""

import os
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import structlog

from salon_scheduling.config.settings import get_settings
from salon_scheduling.contracts.appointment import Appointment, AppointmentStatus, Service

# Keep tests independent from a developer's .env
os.environ["APP_ENV"] = "development"

# Fixed local offset (UTC-3) so day boundaries differ from UTC
LOCAL_TZ = timezone(timedelta(hours=-3))

AppointmentFactory = Callable[..., Appointment]


def local(*args: int) -> datetime:
    """Build an aware datetime in the test timezone."""
    return datetime(*args, tzinfo=LOCAL_TZ)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def haircut() -> Service:
    return Service(id=1, name="Corte", price=Decimal("50.00"), duration_minutes=30)


@pytest.fixture
def manicure() -> Service:
    return Service(id=2, name="Manicure", price=Decimal("30.00"), duration_minutes=45)


@pytest.fixture
def coloring() -> Service:
    return Service(id=3, name="Coloração", price=Decimal("120.00"), duration_minutes=90)


@pytest.fixture
def make_appointment(haircut: Service) -> AppointmentFactory:
    """Factory for appointments with sensible defaults."""
    counter = {"next_id": 1}

    def _make(
        scheduled_at: datetime,
        *,
        status: AppointmentStatus = AppointmentStatus.CONFIRMED,
        services: list[Service] | None = None,
        customer_id: int = 7,
        appointment_id: int | None = None,
    ) -> Appointment:
        if appointment_id is None:
            appointment_id = counter["next_id"]
        counter["next_id"] = max(counter["next_id"], appointment_id) + 1
        return Appointment(
            id=appointment_id,
            owning_customer_id=customer_id,
            scheduled_at=scheduled_at,
            status=status,
            services=[haircut] if services is None else services,
        )

    return _make
