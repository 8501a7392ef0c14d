"""
Stay aggregation: folds per-date availability entries into guest stays.
"""

from dataclasses import dataclass, field

from guesthub.domain.listing import Listing

DEFAULT_GUESTS = 2


@dataclass
class Stay:
    """A guest reservation rebuilt from one or more availability entries."""

    guest_name: str
    platform: str
    check_in: str              # raw upstream value, may be malformed
    guests: int
    property_title: str
    is_past: bool
    dates: list[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.guest_name}-{self.platform}"


def aggregate_stays(listing: Listing) -> dict[str, Stay]:
    """
    Group a listing's availability into stays keyed by "{guest}-{platform}".

    The first entry seen for a key fixes check_in, guests and is_past;
    later entries only add their date.
    """
    stays: dict[str, Stay] = {}
    for entry in listing.availability:
        if not (entry.booked_by and entry.guest_name):
            continue

        key = f"{entry.guest_name}-{entry.booked_by}"
        stay = stays.get(key)
        if stay is None:
            stays[key] = Stay(
                guest_name=entry.guest_name,
                platform=entry.booked_by,
                check_in=entry.check_in or entry.date,
                guests=entry.guests or DEFAULT_GUESTS,
                property_title=listing.title,
                is_past=entry.is_past,
                dates=[entry.date],
            )
        else:
            stay.dates.append(entry.date)
    return stays
