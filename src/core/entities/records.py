"""
Resource record entities.

Canonical, storage-ready records for each resource type served for a
location. Records are append-only: once stored they are never updated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResourceType(str, Enum):
    """Resource types handled by the cache-aside layer."""

    LOCATION = "location"
    WEATHER = "weather"
    EVENTS = "events"
    MOVIES = "movies"


@dataclass(frozen=True)
class WeatherRecord:
    """
    One day of forecast.

    Attributes:
        forecast: Daily summary text
        time: Day rendered as "Fri Jan 01 2021"
    """

    forecast: str
    time: str
    location_id: Optional[int] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class EventRecord:
    """
    A local event.

    Attributes:
        name: Event title
        link: Public event page
        event_date: Start day rendered as "Fri Jan 01 2021"
        summary: Description cut to 500 characters, followed by "...."
    """

    name: str
    link: str
    event_date: str
    summary: str
    location_id: Optional[int] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class MovieRecord:
    """
    A movie matching the location name.

    Attributes:
        title: Original title
        overview: Plot summary
        average_votes: Mean TMDB rating (0-10)
        total_votes: Number of TMDB votes
        image_url: Full poster URL on the TMDB CDN
        popularity: TMDB popularity score
        released_on: Release date as sent by TMDB (YYYY-MM-DD)
    """

    title: str
    overview: str
    average_votes: float
    total_votes: int
    image_url: str
    popularity: float
    released_on: Optional[str] = None
    location_id: Optional[int] = None
    id: Optional[int] = None
