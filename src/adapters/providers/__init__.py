"""
Adaptateurs de fournisseurs, un par type de ressource.

- LocationAdapter : Google Geocoding (table locations)
- WeatherAdapter : Dark Sky (table weather)
- EventsAdapter : Eventbrite (table events)
- MoviesAdapter : TMDB (table movies)

Chaque adaptateur implemente IProviderAdapter defini dans core/ports/providers.py.
"""

from src.adapters.providers.events import EventsAdapter
from src.adapters.providers.location import LocationAdapter
from src.adapters.providers.movies import MoviesAdapter
from src.adapters.providers.weather import WeatherAdapter

__all__ = [
    "LocationAdapter",
    "WeatherAdapter",
    "EventsAdapter",
    "MoviesAdapter",
]
