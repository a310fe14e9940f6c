"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.

This layer contains:
- LocationResolver: resolve-or-create of the root Location entity
- CacheAsideOrchestrator: store-first fetch of weather, events and movies
- InflightRegistry: optional coalescing of concurrent cache misses
"""

from src.services.cache_aside import CacheAsideOrchestrator
from src.services.inflight import InflightRegistry
from src.services.location_resolver import LocationResolver

__all__ = [
    "CacheAsideOrchestrator",
    "InflightRegistry",
    "LocationResolver",
]
