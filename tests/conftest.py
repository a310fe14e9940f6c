"""
Fixtures pytest partagees pour les tests City Explorer.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine SQLite temporaire avec tables creees
- Store persistant ferme en fin de test
- Fetcher HTTP simule (AsyncMock de IHttpFetcher)
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine

from src.config import Settings
from src.core.ports.http_fetcher import IHttpFetcher
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.store import SQLModelPersistenceStore


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles dans tmp_path, avec des cles fictives."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        geocode_api_key="geo-key",
        weather_api_key="weather-key",
        eventbrite_api_key="eventbrite-key",
        movie_api_key="movie-key",
        provider_timeout_seconds=2.0,
        provider_max_attempts=1,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite fichier avec toutes les tables creees."""
    db_engine = create_db_engine(f"sqlite:///{tmp_path}/store.db")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def store(engine: Engine) -> Iterator[SQLModelPersistenceStore]:
    """Store persistant reel, ferme apres le test."""
    persistence_store = SQLModelPersistenceStore(engine)
    yield persistence_store
    persistence_store.close()


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """
    Mock de IHttpFetcher.

    Configurer fetch_json.return_value ou side_effect dans chaque test.
    """
    return AsyncMock(spec=IHttpFetcher)
