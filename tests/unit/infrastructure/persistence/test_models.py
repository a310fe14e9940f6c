"""
Tests pour les modeles SQLModel de persistance.

Verifie que les colonnes des tables correspondent aux champs des entites
et que le registre TABLE_MODELS expose les quatre tables.
"""

from dataclasses import fields

import pytest

from src.core.entities import EventRecord, Location, MovieRecord, WeatherRecord
from src.infrastructure.persistence.models import (
    TABLE_MODELS,
    EventModel,
    LocationModel,
    MovieModel,
    WeatherModel,
)


class TestTableModels:
    """Tests pour le registre des tables."""

    def test_registry_contains_all_tables(self):
        assert set(TABLE_MODELS) == {"locations", "weather", "events", "movies"}

    @pytest.mark.parametrize(
        "table,entity",
        [
            ("locations", Location),
            ("weather", WeatherRecord),
            ("events", EventRecord),
            ("movies", MovieRecord),
        ],
    )
    def test_columns_match_entity_fields(self, table, entity):
        """Chaque champ de l'entite a une colonne du meme nom."""
        entity_fields = {f.name for f in fields(entity)}
        assert entity_fields == set(TABLE_MODELS[table].model_fields)


class TestMovieModel:
    def test_released_on_nullable(self):
        model = MovieModel(
            title="Sleepless in Seattle",
            overview="",
            average_votes=6.6,
            total_votes=881,
            image_url="https://image.tmdb.org/t/p/w200_and_h300_bestv2",
            popularity=8.1,
            location_id=1,
        )
        assert model.released_on is None
        assert model.id is None


class TestLocationModel:
    def test_search_query_is_unique(self):
        column = LocationModel.__table__.c.search_query
        assert column.unique is True

    @pytest.mark.parametrize("model", [WeatherModel, EventModel, MovieModel])
    def test_resource_tables_reference_locations(self, model):
        foreign_keys = list(model.__table__.c.location_id.foreign_keys)
        assert len(foreign_keys) == 1
        assert foreign_keys[0].target_fullname == "locations.id"
