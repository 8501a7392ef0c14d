"""
JsonFileListingSource — reads a listings snapshot exported to disk.

The file holds a JSON array of {"title": ..., "availability": [...]}
objects using the upstream camelCase field names.
"""

import json

from guesthub.domain.listing import Listing, ListingSource


class JsonFileListingSource(ListingSource):

    def __init__(self, path: str):
        self._path = path

    def get_listings(self) -> list[Listing]:
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        return [Listing.from_dict(item) for item in data]
