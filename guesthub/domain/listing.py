"""
Listing data as supplied by the availability record store.

Each listing carries one AvailabilityEntry per calendar date.  Entries
that belong to a booking name the guest and the platform it came from;
everything else is plain availability and ignored by the hub.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AvailabilityEntry:
    """One calendar date on a listing."""

    date: str                     # ISO: "2026-03-05"
    booked_by: str | None = None  # platform: "airbnb", "booking", "vrbo"
    guest_name: str | None = None
    is_past: bool = False
    check_in: str | None = None   # falls back to date when aggregated
    guests: int | None = None     # falls back to 2 when aggregated

    @classmethod
    def from_dict(cls, data: dict) -> "AvailabilityEntry":
        return cls(
            date=data.get("date", ""),
            booked_by=data.get("bookedBy"),
            guest_name=data.get("guestName"),
            is_past=data.get("isPast") is True,
            check_in=data.get("checkIn"),
            guests=data.get("guests"),
        )


@dataclass
class Listing:
    title: str
    availability: list[AvailabilityEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Listing":
        return cls(
            title=data.get("title", ""),
            availability=[
                AvailabilityEntry.from_dict(a) for a in data.get("availability") or []
            ],
        )


class ListingSource(ABC):
    """
    Port: where listings and their availability come from.

    The hub only ever sees a complete snapshot of all listings; sources
    never deliver deltas.
    """

    @abstractmethod
    def get_listings(self) -> list[Listing]:
        """Return every listing with its availability records."""
        ...
