"""
Location entity.

The root entity every resource record is keyed against. A location is
created the first time a search query is resolved, then reused as-is.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """
    A geocoded search query.

    Attributes:
        search_query: Free-text query exactly as typed by the user (unique)
        formatted_query: Canonical address returned by the geocoder
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        id: Internal database ID (None until persisted)
    """

    search_query: str
    formatted_query: str
    latitude: float
    longitude: float
    id: Optional[int] = None
