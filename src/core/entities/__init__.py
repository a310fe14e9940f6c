"""
Business entities representing core domain concepts.

Entities are immutable value types: a location and the resource records
attached to it are only ever inserted, never modified.

Exports:
- Location: A geocoded search query
- ResourceType: Tag selecting the resource table and provider
- WeatherRecord: One day of forecast
- EventRecord: A local event
- MovieRecord: A movie matching the location name
"""

from src.core.entities.location import Location
from src.core.entities.records import (
    EventRecord,
    MovieRecord,
    ResourceType,
    WeatherRecord,
)

__all__ = [
    "Location",
    "ResourceType",
    "WeatherRecord",
    "EventRecord",
    "MovieRecord",
]
