import os

from guesthub.domain.listing import ListingSource


def create_listing_source(kind: str | None = None) -> ListingSource:
    """
    Factory: create the right listing source based on config.

    The kind can be passed explicitly or read from the LISTINGS_SOURCE
    env var. Defaults to "memory".
    """
    kind = kind or os.environ.get("LISTINGS_SOURCE", "memory")

    if kind == "http":
        from guesthub.adapters.http_listings import HttpListingSource

        return HttpListingSource(
            base_url=os.environ["LISTINGS_API_URL"],
            api_key=os.environ.get("LISTINGS_API_KEY") or None,
        )

    if kind == "file":
        from guesthub.adapters.json_file_listings import JsonFileListingSource

        return JsonFileListingSource(os.environ["LISTINGS_FILE"])

    if kind == "memory":
        from guesthub.adapters.simulator_listings import InMemoryListingSource

        return InMemoryListingSource()

    raise ValueError(f"Unknown listing source: {kind!r}")
