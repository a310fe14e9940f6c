"""
Normalisation des reponses fournisseurs en enregistrements canoniques.

Fonctions pures : elles recoivent un objet deja valide par son schema
et retournent une entite immuable. Aucune E/S, aucun etat.
"""

from datetime import date, datetime, timezone
from typing import Optional

from src.adapters.providers.schemas import (
    DailyForecast,
    EventbriteEvent,
    GeocodeResult,
    TmdbMovie,
)
from src.core.entities import EventRecord, Location, MovieRecord, WeatherRecord

TMDB_POSTER_BASE_URL = "https://image.tmdb.org/t/p/w200_and_h300_bestv2"

SUMMARY_MAX_LENGTH = 500
SUMMARY_MARKER = "...."

# Noms anglais fixes, independants de la locale du processus
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date_string(day: date) -> str:
    """
    Formate une date comme Date.toDateString() en JavaScript.

    Exemple : date(2021, 1, 1) -> "Fri Jan 01 2021"
    """
    return f"{_WEEKDAYS[day.weekday()]} {_MONTHS[day.month - 1]} {day.day:02d} {day.year}"


def truncate_summary(text: Optional[str]) -> str:
    """
    Coupe une description a 500 caracteres et ajoute "....".

    Le marqueur est ajoute meme quand le texte est plus court.
    """
    return (text or "")[:SUMMARY_MAX_LENGTH] + SUMMARY_MARKER


def build_image_url(poster_path: Optional[str]) -> str:
    """
    Construit l'URL du poster sur le CDN TMDB.

    Sans poster_path, retourne l'URL de base suivie d'un fragment vide.
    """
    return f"{TMDB_POSTER_BASE_URL}{poster_path or ''}"


def normalize_location(search_query: str, result: GeocodeResult) -> Location:
    """Construit une Location a partir du premier resultat de geocodage."""
    return Location(
        search_query=search_query,
        formatted_query=result.formatted_address,
        latitude=result.geometry.location.lat,
        longitude=result.geometry.location.lng,
    )


def normalize_weather(day: DailyForecast) -> WeatherRecord:
    """Jour de prevision -> WeatherRecord (date UTC du timestamp)."""
    moment = datetime.fromtimestamp(day.time, tz=timezone.utc)
    return WeatherRecord(forecast=day.summary, time=format_date_string(moment.date()))


def normalize_event(event: EventbriteEvent) -> EventRecord:
    """Evenement Eventbrite -> EventRecord."""
    description = event.description.text if event.description else None
    return EventRecord(
        name=event.name.text,
        link=event.url,
        event_date=format_date_string(event.start.local.date()),
        summary=truncate_summary(description),
    )


def normalize_movie(movie: TmdbMovie) -> MovieRecord:
    """Resultat de recherche TMDB -> MovieRecord."""
    return MovieRecord(
        title=movie.original_title,
        overview=movie.overview or "",
        average_votes=movie.vote_average,
        total_votes=movie.vote_count,
        image_url=build_image_url(movie.poster_path),
        popularity=movie.popularity,
        released_on=movie.release_date,
    )
