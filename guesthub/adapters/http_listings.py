import requests

from guesthub.domain.listing import Listing, ListingSource


class HttpListingSource(ListingSource):
    """Adapter: listings served by the property-management backend."""

    def __init__(self, base_url: str, api_key: str | None = None, timeout: float = 10):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Cache-Control": "no-cache",
            }
        )
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"

    def get_listings(self) -> list[Listing]:
        resp = self.session.get(f"{self._base_url}/listings", timeout=self._timeout)
        resp.raise_for_status()
        data = resp.json()

        # Either a bare array or {"listings": [...]}
        items = (data.get("listings") if isinstance(data, dict) else data) or []
        return [Listing.from_dict(item) for item in items]
