"""
Booking requests awaiting the host's decision.

Requests are seeded once with fixed sample data and only ever change
status, through approve / decline, and only while pending.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterator, Literal, Union

log = logging.getLogger(__name__)

RequestStatus = Literal["pending", "approved", "declined"]
RequestAction = Literal["approve", "decline"]

_ACTION_STATUS: dict[str, RequestStatus] = {
    "approve": "approved",
    "decline": "declined",
}


# -- platform-specific details ----------------------------------------------


@dataclass(frozen=True)
class BookingComSpecific:
    genius_level: int

    def badge(self) -> str | None:
        return f"Genius Level {self.genius_level}"


@dataclass(frozen=True)
class AirbnbSpecific:
    guest_rating: float

    def badge(self) -> str | None:
        return f"⭐ {self.guest_rating} Guest Rating"


@dataclass(frozen=True)
class VrboSpecific:
    verified: bool

    def badge(self) -> str | None:
        return "✓ Verified Guest" if self.verified else None


PlatformSpecific = Union[BookingComSpecific, AirbnbSpecific, VrboSpecific]


@dataclass(frozen=True)
class BookingRequest:
    id: str
    guest_name: str
    platform: str
    guests: int
    check_in: date
    check_out: date
    status: RequestStatus
    property_title: str
    total_price: int
    platform_specific: PlatformSpecific | None = None


SAMPLE_REQUESTS = [
    BookingRequest(
        id="req-1",
        guest_name="Sarah Johnson",
        platform="booking",
        guests=2,
        check_in=date(2025, 12, 20),
        check_out=date(2025, 12, 25),
        status="pending",
        property_title="Cozy Downtown Apartment",
        total_price=850,
        platform_specific=BookingComSpecific(genius_level=3),
    ),
    BookingRequest(
        id="req-2",
        guest_name="Michael Chen",
        platform="airbnb",
        guests=4,
        check_in=date(2025, 12, 18),
        check_out=date(2025, 12, 22),
        status="pending",
        property_title="Cozy Downtown Apartment",
        total_price=680,
        platform_specific=AirbnbSpecific(guest_rating=4.8),
    ),
    BookingRequest(
        id="req-3",
        guest_name="Emma Williams",
        platform="vrbo",
        guests=3,
        check_in=date(2025, 12, 28),
        check_out=date(2026, 1, 2),
        status="approved",
        property_title="Cozy Downtown Apartment",
        total_price=1020,
        platform_specific=VrboSpecific(verified=True),
    ),
]


class BookingRequestList:
    """Ordered, in-memory collection of booking requests."""

    def __init__(self):
        self._requests: list[BookingRequest] = []

    def __iter__(self) -> Iterator[BookingRequest]:
        return iter(self._requests)

    def __len__(self) -> int:
        return len(self._requests)

    def seed(self, requests: list[BookingRequest]) -> None:
        self._requests = list(requests)

    def all(self) -> list[BookingRequest]:
        return list(self._requests)

    def pending(self) -> list[BookingRequest]:
        return [r for r in self._requests if r.status == "pending"]

    def get(self, request_id: str) -> BookingRequest | None:
        return next((r for r in self._requests if r.id == request_id), None)

    def transition(self, request_id: str, action: RequestAction) -> BookingRequest | None:
        """
        Approve or decline a pending request.

        Returns the request as it stands afterwards, or None when no request
        has this id.  A request that is no longer pending keeps its status.
        """
        if action not in _ACTION_STATUS:
            raise ValueError(f"Unknown request action: {action!r}")

        for i, req in enumerate(self._requests):
            if req.id != request_id:
                continue
            if req.status != "pending":
                log.warning(
                    "req=%s cannot %s: status is already %s", request_id, action, req.status
                )
                return req
            updated = replace(req, status=_ACTION_STATUS[action])
            self._requests[i] = updated
            log.info("req=%s %s → %s", request_id, action, updated.status)
            return updated
        return None
