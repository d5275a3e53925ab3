"""Unit Tests - Time Window Policy (edit and cancel eligibility)."""

from datetime import timedelta, timezone

import pytest

from salon_scheduling.contracts.appointment import AppointmentStatus
from salon_scheduling.core.time_window import CANCEL_RULES, can_cancel, can_edit
from tests.conftest import local


class TestCanEdit:
    """Tests for the edit lead-time rule."""

    def setup_method(self) -> None:
        self.now = local(2024, 6, 12, 10, 0)

    def test_exactly_two_days_is_allowed(self) -> None:
        """Test that the two-day boundary is on the allowed side."""
        decision = can_edit(self.now + timedelta(days=2), self.now)

        assert decision.allowed is True
        assert decision.reason is None

    def test_just_under_two_days_is_denied(self) -> None:
        """Test that 1.999999 days of notice is not enough."""
        decision = can_edit(
            self.now + timedelta(days=2) - timedelta(microseconds=86400),
            self.now,
        )

        assert decision.allowed is False
        assert decision.reason == "cannot edit appointments with less than 2 days' notice"

    def test_difference_is_not_floored(self) -> None:
        """Test that 1.5 days is denied even though it rounds to 2."""
        decision = can_edit(self.now + timedelta(days=1, hours=12), self.now)

        assert not decision

    def test_far_future_is_allowed(self) -> None:
        """Test that an appointment weeks away can be edited."""
        assert can_edit(self.now + timedelta(weeks=3), self.now)

    def test_past_appointment_is_denied(self) -> None:
        """Test that an appointment in the past cannot be edited."""
        assert not can_edit(self.now - timedelta(hours=1), self.now)

    def test_compares_instants_across_timezones(self) -> None:
        """Test that offsets are honored when comparing instants."""
        utc_scheduled = (self.now + timedelta(days=2)).astimezone(timezone.utc)

        assert can_edit(utc_scheduled, self.now)
        assert not can_edit(utc_scheduled - timedelta(seconds=1), self.now)

    def test_custom_lead_time(self) -> None:
        """Test that an alternate lead time changes the rule and reason."""
        scheduled = self.now + timedelta(days=1, hours=1)

        assert can_edit(scheduled, self.now, lead_time=timedelta(days=1))

        decision = can_edit(scheduled, self.now, lead_time=timedelta(days=3))
        assert not decision
        assert decision.reason == "cannot edit appointments with less than 3 days' notice"


class TestCanCancel:
    """Tests for the status-based cancel rule."""

    @pytest.mark.parametrize(
        "status",
        [AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED],
    )
    def test_open_statuses_can_be_canceled(self, status: AppointmentStatus) -> None:
        """Test that PENDING and CONFIRMED appointments can be canceled."""
        decision = can_cancel(status)

        assert decision.allowed is True
        assert decision.reason is None

    def test_done_cannot_be_canceled(self) -> None:
        """Test that a completed appointment cannot be canceled."""
        decision = can_cancel(AppointmentStatus.DONE)

        assert decision.allowed is False
        assert decision.reason == "cannot cancel a completed appointment"

    def test_canceled_cannot_be_canceled_again(self) -> None:
        """Test that a canceled appointment cannot be canceled again."""
        decision = can_cancel(AppointmentStatus.CANCELED)

        assert decision.allowed is False
        assert decision.reason == "appointment is already canceled"

    def test_accepts_status_value(self) -> None:
        """Test that the raw status string is accepted."""
        assert can_cancel("DONE") == can_cancel(AppointmentStatus.DONE)  # type: ignore[arg-type]

    def test_every_status_has_a_rule(self) -> None:
        """Test that the cancel table covers the whole status set."""
        assert set(CANCEL_RULES) == set(AppointmentStatus)
