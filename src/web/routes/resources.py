"""
Routes des ressources rattachées à une localisation.

GET /weather, /events, /movies avec data[search_query] (et data[latitude],
data[longitude] pour la météo et les événements).

La localisation est d'abord résolue par search_query, puis les ressources
sont servies par l'orchestrateur cache-aside. Les coordonnées absentes de
la requête sont reprises de la localisation résolue.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from ...core.entities import ResourceType
from ...services.cache_aside import CacheAsideOrchestrator
from ...services.location_resolver import LocationResolver
from ..deps import get_location_resolver, get_orchestrator, parse_data_fields

router = APIRouter()


async def _serve(
    request: Request,
    resource_type: ResourceType,
    resolver: LocationResolver,
    orchestrator: CacheAsideOrchestrator,
) -> list[dict[str, Any]]:
    data = parse_data_fields(request)
    search_query = data.get("search_query")
    if not search_query:
        raise HTTPException(status_code=400, detail="Missing data[search_query]")

    location = await resolver.resolve(search_query)
    provider_params = {
        "query": search_query,
        "latitude": data.get("latitude") or location.latitude,
        "longitude": data.get("longitude") or location.longitude,
    }
    records = await orchestrator.fetch(location.id, resource_type, provider_params)
    return [asdict(record) for record in records]


@router.get("/weather")
async def get_weather(
    request: Request,
    resolver: LocationResolver = Depends(get_location_resolver),
    orchestrator: CacheAsideOrchestrator = Depends(get_orchestrator),
) -> list[dict[str, Any]]:
    """Prévisions quotidiennes pour la localisation."""
    return await _serve(request, ResourceType.WEATHER, resolver, orchestrator)


@router.get("/events")
async def get_events(
    request: Request,
    resolver: LocationResolver = Depends(get_location_resolver),
    orchestrator: CacheAsideOrchestrator = Depends(get_orchestrator),
) -> list[dict[str, Any]]:
    """Événements autour de la localisation."""
    return await _serve(request, ResourceType.EVENTS, resolver, orchestrator)


@router.get("/movies")
async def get_movies(
    request: Request,
    resolver: LocationResolver = Depends(get_location_resolver),
    orchestrator: CacheAsideOrchestrator = Depends(get_orchestrator),
) -> list[dict[str, Any]]:
    """Films dont le titre correspond à la recherche."""
    return await _serve(request, ResourceType.MOVIES, resolver, orchestrator)
