"""
Tests pour CacheAsideOrchestrator.

Verifie le comportement cache-aside sur le store SQLite reel:
- hit : lignes stockees retournees, aucun appel fournisseur
- miss : un appel, N insertions, N enregistrements retournes
- echec fournisseur : exception propagee, aucune ligne inseree
- echec d'insertion : journalise, donnees retournees quand meme
- regroupement optionnel des miss concurrents
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlmodel import Session

from src.adapters.providers import EventsAdapter, MoviesAdapter, WeatherAdapter
from src.core.entities import MovieRecord, ResourceType, WeatherRecord
from src.core.errors import MalformedPayload, PersistenceError, ProviderUnavailable
from src.core.ports.store import IPersistenceStore
from src.infrastructure.persistence.models import LocationModel
from src.services.cache_aside import CacheAsideOrchestrator
from tests.fixtures.provider_responses import (
    FORECAST_MALFORMED,
    FORECAST_RESPONSE,
    MOVIES_RESPONSE,
)

ADAPTERS = {
    ResourceType.WEATHER: WeatherAdapter(api_key="weather-key"),
    ResourceType.EVENTS: EventsAdapter(api_key="eventbrite-key"),
    ResourceType.MOVIES: MoviesAdapter(api_key="movie-key"),
}

PARAMS = {"query": "seattle", "latitude": 47.6062095, "longitude": -122.3320708}


@pytest.fixture
def location_id(engine) -> int:
    """Localisation 'seattle' deja presente en base."""
    with Session(engine) as session:
        location = LocationModel(
            search_query="seattle",
            formatted_query="Seattle, WA, USA",
            latitude=47.6062095,
            longitude=-122.3320708,
        )
        session.add(location)
        session.commit()
        session.refresh(location)
        return location.id


@pytest.fixture
def orchestrator(store, mock_fetcher) -> CacheAsideOrchestrator:
    return CacheAsideOrchestrator(store=store, fetcher=mock_fetcher, adapters=ADAPTERS)


class TestMiss:
    """Premier appel pour un couple (localisation, type)."""

    @pytest.mark.asyncio
    async def test_fetches_stores_and_returns_records(
        self, orchestrator, store, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.return_value = FORECAST_RESPONSE

        records = await orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS)

        assert len(records) == 3
        assert all(isinstance(r, WeatherRecord) for r in records)
        assert records[0].time == "Fri Jan 01 2021"
        assert all(r.location_id == location_id for r in records)
        mock_fetcher.fetch_json.assert_awaited_once()

        rows = await store.find_by("weather", "location_id", location_id)
        assert [row["forecast"] for row in rows] == [r.forecast for r in records]

    @pytest.mark.asyncio
    async def test_empty_provider_result_stores_nothing(
        self, orchestrator, store, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.return_value = {"page": 1, "results": []}

        records = await orchestrator.fetch(location_id, ResourceType.MOVIES, PARAMS)

        assert records == []
        assert await store.find_by("movies", "location_id", location_id) == []


class TestHit:
    """Appels suivants pour un couple deja stocke."""

    @pytest.mark.asyncio
    async def test_second_call_served_from_store(
        self, orchestrator, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.return_value = MOVIES_RESPONSE

        first = await orchestrator.fetch(location_id, ResourceType.MOVIES, PARAMS)
        second = await orchestrator.fetch(location_id, ResourceType.MOVIES, PARAMS)

        assert mock_fetcher.fetch_json.await_count == 1
        assert [m.title for m in second] == [m.title for m in first]
        assert all(isinstance(m, MovieRecord) and m.id is not None for m in second)

    @pytest.mark.asyncio
    async def test_types_cached_independently(
        self, orchestrator, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.side_effect = [FORECAST_RESPONSE, MOVIES_RESPONSE]

        weather = await orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS)
        movies = await orchestrator.fetch(location_id, ResourceType.MOVIES, PARAMS)

        assert len(weather) == 3
        assert len(movies) == 2
        assert mock_fetcher.fetch_json.await_count == 2


class TestFailures:
    @pytest.mark.asyncio
    async def test_provider_error_leaves_no_rows(
        self, orchestrator, store, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.side_effect = ProviderUnavailable("darksky", "timeout apres 2.0s")

        with pytest.raises(ProviderUnavailable):
            await orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS)

        assert await store.find_by("weather", "location_id", location_id) == []

    @pytest.mark.asyncio
    async def test_malformed_payload_leaves_no_rows(
        self, orchestrator, store, mock_fetcher, location_id
    ):
        mock_fetcher.fetch_json.return_value = FORECAST_MALFORMED

        with pytest.raises(MalformedPayload):
            await orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS)

        assert await store.find_by("weather", "location_id", location_id) == []

    @pytest.mark.asyncio
    async def test_insert_failure_still_returns_records(self, mock_fetcher):
        store = AsyncMock(spec=IPersistenceStore)
        store.find_by.return_value = []
        store.insert.side_effect = PersistenceError("database is locked", table="weather")
        mock_fetcher.fetch_json.return_value = FORECAST_RESPONSE
        orchestrator = CacheAsideOrchestrator(
            store=store, fetcher=mock_fetcher, adapters=ADAPTERS
        )

        records = await orchestrator.fetch(1, ResourceType.WEATHER, PARAMS)

        assert len(records) == 3
        assert store.insert.await_count == 3

    @pytest.mark.asyncio
    async def test_unknown_resource_type_raises(self, orchestrator):
        with pytest.raises(ValueError):
            await orchestrator.fetch(1, ResourceType.LOCATION, PARAMS)


class TestConcurrentMisses:
    """Deux requetes simultanees sur un couple absent."""

    @staticmethod
    async def _slow_forecast(request):
        await asyncio.sleep(0.01)
        return FORECAST_RESPONSE

    @pytest.mark.asyncio
    async def test_without_dedupe_both_fetch(self, store, mock_fetcher, location_id):
        mock_fetcher.fetch_json.side_effect = self._slow_forecast
        orchestrator = CacheAsideOrchestrator(
            store=store, fetcher=mock_fetcher, adapters=ADAPTERS
        )

        await asyncio.gather(
            orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS),
            orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS),
        )

        assert mock_fetcher.fetch_json.await_count == 2
        assert len(await store.find_by("weather", "location_id", location_id)) == 6

    @pytest.mark.asyncio
    async def test_with_dedupe_single_fetch(self, store, mock_fetcher, location_id):
        mock_fetcher.fetch_json.side_effect = self._slow_forecast
        orchestrator = CacheAsideOrchestrator(
            store=store, fetcher=mock_fetcher, adapters=ADAPTERS, dedupe_inflight=True
        )

        first, second = await asyncio.gather(
            orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS),
            orchestrator.fetch(location_id, ResourceType.WEATHER, PARAMS),
        )

        assert first == second
        assert mock_fetcher.fetch_json.await_count == 1
        assert len(await store.find_by("weather", "location_id", location_id)) == 3
