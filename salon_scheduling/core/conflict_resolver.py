"""Conflict Resolver - Merge-or-create decision for new bookings.

A customer who already has an appointment in the week of a new request
is offered to fold the new services into it instead of booking a second
visit. The resolver only proposes; the caller presents the choice and
reports the outcome back through ``accept`` or ``reject``.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from salon_scheduling.config.policy import SchedulingPolicy, get_policy
from salon_scheduling.contracts.appointment import Appointment, AppointmentStatus, Service
from salon_scheduling.contracts.decision import BookingRequest, CreateNew, Decision, Merge
from salon_scheduling.core.boundaries import week_range, within
from salon_scheduling.core.errors import InvalidRequest
from salon_scheduling.utils.logger import get_logger

logger = get_logger(__name__)


class ConflictResolver:
    """Deterministic merge-or-create decision for booking requests.

    Same input always produces the same decision: the resolver holds no
    state besides an optional pinned week start.
    """

    def __init__(self, week_start: int | None = None) -> None:
        """Initialize the resolver.

        Args:
            week_start: First weekday of the week, Python numbering.
                When omitted the configured policy is read on every
                call, so the resolver shares its week with the period
                filter and the weekly stats.
        """
        self._week_start = week_start

    @property
    def week_start(self) -> int:
        if self._week_start is not None:
            return self._week_start
        return get_policy().week_start

    @classmethod
    def from_policy(cls, policy: SchedulingPolicy) -> "ConflictResolver":
        return cls(week_start=policy.week_start)

    def resolve(
        self,
        existing: Iterable[Appointment],
        requested_date: datetime | str | None,
        requested_services: Sequence[Service | dict[str, Any]],
        *,
        customer_id: int | None = None,
    ) -> Decision:
        """Decide whether a request merges into an existing appointment.

        Args:
            existing: The customer's current appointments.
            requested_date: Requested date and time, aware datetime or
                ISO-8601 string with offset.
            requested_services: Services to book, at least one.
            customer_id: Requesting customer. When given, appointments
                owned by someone else are never merge targets.

        Returns:
            ``Merge`` targeting the earliest non-canceled appointment in
            the requested week, or ``CreateNew`` when there is none.

        Raises:
            InvalidRequest: If the date is invalid or no service is given.
        """
        request = self._validate(customer_id, requested_date, requested_services)
        candidates = self.same_week_candidates(existing, request)

        if not candidates:
            logger.info(
                "conflict_none_found",
                customer_id=request.customer_id,
                requested_date=request.requested_date.isoformat(),
            )
            return CreateNew(
                date=request.requested_date,
                services=request.requested_services,
            )

        target = min(candidates, key=lambda ap: ap.scheduled_at)
        logger.info(
            "conflict_merge_proposed",
            customer_id=request.customer_id,
            target_id=target.id,
            candidates=len(candidates),
            requested_date=request.requested_date.isoformat(),
        )
        return Merge(
            target=target,
            added_services=request.requested_services,
            requested_date=request.requested_date,
        )

    def same_week_candidates(
        self,
        existing: Iterable[Appointment],
        request: BookingRequest,
    ) -> list[Appointment]:
        """Non-canceled appointments in the week of the requested date.

        The week is anchored to the requested date, not to the current
        instant.
        """
        bounds = week_range(request.requested_date, self.week_start)
        return [
            ap
            for ap in existing
            if ap.status is not AppointmentStatus.CANCELED
            and (
                request.customer_id is None
                or ap.owning_customer_id == request.customer_id
            )
            and within(ap.scheduled_at, bounds)
        ]

    def accept(self, merge: Merge) -> Appointment:
        """Apply an accepted merge.

        Returns:
            The target appointment carrying its services followed by the
            added ones. Duplicate services are kept and billed twice.
        """
        merged = merge.target.model_copy(update={"services": merge.merged_services})
        logger.info(
            "conflict_merge_accepted",
            target_id=merge.target.id,
            service_count=merged.service_count,
            total_price=str(merged.total_price),
        )
        return merged

    def reject(self, merge: Merge) -> CreateNew:
        """Turn a rejected merge back into the original standalone request."""
        logger.info("conflict_merge_rejected", target_id=merge.target.id)
        return CreateNew(date=merge.requested_date, services=merge.added_services)

    @staticmethod
    def _validate(
        customer_id: int | None,
        requested_date: datetime | str | None,
        requested_services: Sequence[Service | dict[str, Any]],
    ) -> BookingRequest:
        try:
            return BookingRequest(
                customer_id=customer_id,
                requested_date=requested_date,
                requested_services=list(requested_services or []),
            )
        except ValidationError as exc:
            errors = exc.errors(include_url=False)
            logger.warning(
                "booking_request_invalid",
                customer_id=customer_id,
                fields=[".".join(str(p) for p in err["loc"]) for err in errors],
            )
            raise InvalidRequest("Invalid booking request", errors=errors) from exc


def resolve(
    existing: Iterable[Appointment],
    requested_date: datetime | str | None,
    requested_services: Sequence[Service | dict[str, Any]],
    *,
    customer_id: int | None = None,
) -> Decision:
    """Resolve a booking request with the configured resolver."""
    return get_conflict_resolver().resolve(
        existing,
        requested_date,
        requested_services,
        customer_id=customer_id,
    )


# Singleton instance
_conflict_resolver: ConflictResolver | None = None


def get_conflict_resolver() -> ConflictResolver:
    """Get or create the resolver that follows the configured policy."""
    global _conflict_resolver
    if _conflict_resolver is None:
        _conflict_resolver = ConflictResolver()
    return _conflict_resolver
