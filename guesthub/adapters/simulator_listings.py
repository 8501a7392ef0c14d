"""
In-memory ListingSource for tests and local runs — no backend required.
"""

from guesthub.domain.listing import Listing, ListingSource


class InMemoryListingSource(ListingSource):

    def __init__(self, listings: list[Listing] | None = None):
        self._listings: list[Listing] = list(listings or [])

    def inject_listing(self, listing: Listing) -> None:
        """Test helper: add a listing to the snapshot."""
        self._listings.append(listing)

    def get_listings(self) -> list[Listing]:
        return list(self._listings)
