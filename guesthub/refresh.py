"""
One refresh cycle: pull the listings snapshot and rebuild conversations.

Kept apart from scripts/run.py so it can be tested with simulators only.
"""

import logging
from datetime import date

from guesthub.domain.listing import ListingSource
from guesthub.hub import GuestHub

log = logging.getLogger(__name__)


def refresh_once(hub: GuestHub, source: ListingSource, today: date | None = None) -> int:
    """
    Fetch listings and feed them to the hub.

    Returns the number of chats derived.  When the source fails the
    previous conversations stay in place.
    """
    try:
        listings = source.get_listings()
    except Exception as exc:
        log.error("Failed to fetch listings: %s", exc)
        return 0

    log.debug("Fetched %d listing(s)", len(listings))
    chats = hub.refresh(listings, today)
    return len(chats)
