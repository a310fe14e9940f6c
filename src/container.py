"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le store persistant est une ressource unique du processus : ouvert au
premier usage, ferme par shutdown_resources().
"""

from dependency_injector import containers, providers

from .adapters.api.http_fetcher import HttpxFetcher
from .adapters.providers import (
    EventsAdapter,
    LocationAdapter,
    MoviesAdapter,
    WeatherAdapter,
)
from .config import Settings
from .core.entities import ResourceType
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.store import open_store
from .services.cache_aside import CacheAsideOrchestrator
from .services.location_resolver import LocationResolver


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        resolver = container.location_resolver()
        orchestrator = container.orchestrator()
        ...
        await container.http_fetcher().close()
        container.shutdown_resources()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine - un seul par processus
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Store - session unique ouverte au demarrage, fermee a l'arret
    store = providers.Resource(open_store, engine=engine)

    # Client HTTP - Singleton partage par tous les adaptateurs
    http_fetcher = providers.Singleton(
        HttpxFetcher,
        timeout=config.provided.provider_timeout_seconds,
        max_attempts=config.provided.provider_max_attempts,
    )

    # Adaptateurs fournisseurs (stateless - Singletons)
    location_adapter = providers.Singleton(
        LocationAdapter, api_key=config.provided.geocode_api_key
    )
    weather_adapter = providers.Singleton(
        WeatherAdapter, api_key=config.provided.weather_api_key
    )
    events_adapter = providers.Singleton(
        EventsAdapter, api_key=config.provided.eventbrite_api_key
    )
    movies_adapter = providers.Singleton(
        MoviesAdapter, api_key=config.provided.movie_api_key
    )

    # Selection de l'adaptateur par type, figee au demarrage
    resource_adapters = providers.Dict(
        {
            ResourceType.WEATHER: weather_adapter,
            ResourceType.EVENTS: events_adapter,
            ResourceType.MOVIES: movies_adapter,
        }
    )

    # Services
    location_resolver = providers.Singleton(
        LocationResolver,
        store=store,
        fetcher=http_fetcher,
        adapter=location_adapter,
        dedupe_inflight=config.provided.dedupe_inflight,
    )

    orchestrator = providers.Singleton(
        CacheAsideOrchestrator,
        store=store,
        fetcher=http_fetcher,
        adapters=resource_adapters,
        dedupe_inflight=config.provided.dedupe_inflight,
    )
