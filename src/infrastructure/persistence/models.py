"""
Modeles SQLModel pour la base de donnees City Explorer.

Ces modeles representent les tables de la base. Ils sont distincts des
entites de domaine (dataclass dans core/entities/) selon l'architecture
hexagonale; les colonnes portent les memes noms que les champs des entites.

Tables:
- locations: Recherches geocodees (unique par search_query)
- weather: Previsions quotidiennes
- events: Evenements
- movies: Films

Les trois tables de ressources referencent locations.id via location_id,
sans cascade. Aucune table n'est jamais mise a jour : ajout seul.
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class LocationModel(SQLModel, table=True):
    """Localisation resolue par le geocodeur."""

    __tablename__ = "locations"

    id: int | None = Field(default=None, primary_key=True)
    search_query: str = Field(index=True, unique=True)
    formatted_query: str
    latitude: float
    longitude: float


class WeatherModel(SQLModel, table=True):
    """Jour de prevision pour une localisation."""

    __tablename__ = "weather"

    id: int | None = Field(default=None, primary_key=True)
    forecast: str
    time: str  # ex: "Fri Jan 01 2021"
    location_id: int = Field(foreign_key="locations.id", index=True)


class EventModel(SQLModel, table=True):
    """Evenement pour une localisation."""

    __tablename__ = "events"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    link: str
    event_date: str
    summary: str
    location_id: int = Field(foreign_key="locations.id", index=True)


class MovieModel(SQLModel, table=True):
    """Film associe a une localisation."""

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    overview: str
    average_votes: float
    total_votes: int
    image_url: str
    popularity: float
    released_on: str | None = None  # YYYY-MM-DD tel que fourni par TMDB
    location_id: int = Field(foreign_key="locations.id", index=True)


# Tables accessibles par le store, par nom
TABLE_MODELS: dict[str, type[SQLModel]] = {
    "locations": LocationModel,
    "weather": WeatherModel,
    "events": EventModel,
    "movies": MovieModel,
}
