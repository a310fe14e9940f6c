"""
Schemas pydantic des reponses fournisseurs.

Chaque fournisseur a un schema explicite ne decrivant que les champs
consommes. Les champs inconnus sont ignores; un champ attendu absent ou
de mauvais type fait echouer la validation, convertie en MalformedPayload
par les adaptateurs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProviderSchema(BaseModel):
    """Base commune : ignore les champs non consommes."""

    model_config = ConfigDict(extra="ignore", frozen=True)


# --- Google Geocoding -------------------------------------------------------


class GeocodeLatLng(ProviderSchema):
    lat: float
    lng: float


class GeocodeGeometry(ProviderSchema):
    location: GeocodeLatLng


class GeocodeResult(ProviderSchema):
    formatted_address: str
    geometry: GeocodeGeometry


class GeocodeResponse(ProviderSchema):
    """GET /maps/api/geocode/json"""

    results: list[GeocodeResult]
    status: Optional[str] = None
    error_message: Optional[str] = None


# --- Dark Sky ---------------------------------------------------------------


class DailyForecast(ProviderSchema):
    summary: str
    time: int  # Epoch en secondes


class DailyBlock(ProviderSchema):
    data: list[DailyForecast]


class ForecastResponse(ProviderSchema):
    """GET /forecast/{key}/{lat},{lng}"""

    daily: DailyBlock


# --- Eventbrite -------------------------------------------------------------


class EventName(ProviderSchema):
    text: str


class EventDescription(ProviderSchema):
    text: Optional[str] = None


class EventStart(ProviderSchema):
    local: datetime  # Heure locale du lieu, sans fuseau


class EventbriteEvent(ProviderSchema):
    name: EventName
    url: str
    start: EventStart
    description: Optional[EventDescription] = None


class EventSearchResponse(ProviderSchema):
    """GET /v3/events/search/"""

    events: list[EventbriteEvent]


# --- TMDB -------------------------------------------------------------------


class TmdbMovie(ProviderSchema):
    original_title: str
    overview: Optional[str] = None
    vote_average: float
    vote_count: int
    popularity: float
    poster_path: Optional[str] = None
    release_date: Optional[str] = None


class MovieSearchResponse(ProviderSchema):
    """GET /3/search/movie"""

    results: list[TmdbMovie]
