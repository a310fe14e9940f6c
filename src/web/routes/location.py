"""
Route de résolution des localisations.

GET /location?data=<recherche> : retourne la Location, créée au premier appel.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, Request

from ...config import Settings
from ...services.location_resolver import LocationResolver
from ..deps import get_location_resolver, get_settings

router = APIRouter()


@router.get("/location")
async def get_location(
    request: Request,
    resolver: LocationResolver = Depends(get_location_resolver),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Résout la recherche libre `data` (défaut : default_location)."""
    query = request.query_params.get("data") or settings.default_location
    location = await resolver.resolve(query)
    return asdict(location)
