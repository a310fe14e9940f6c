"""
Dépendances partagées de l'application web.

Fournit l'accès aux services du Container DI et la lecture des paramètres
`data` envoyés par le frontend (notation à crochets :
data[search_query]=seattle, ou notation pointée : data.search_query=seattle).
"""

import re

from fastapi import Request

from ..config import Settings
from ..container import Container
from ..services.cache_aside import CacheAsideOrchestrator
from ..services.location_resolver import LocationResolver

_DATA_FIELD = re.compile(r"^data(?:\[(?P<bracket>[^\]]+)\]|\.(?P<dotted>.+))$")


def get_container(request: Request) -> Container:
    """Retourne le Container initialisé par le lifespan de l'application."""
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).config()


def get_location_resolver(request: Request) -> LocationResolver:
    return get_container(request).location_resolver()


def get_orchestrator(request: Request) -> CacheAsideOrchestrator:
    return get_container(request).orchestrator()


def parse_data_fields(request: Request) -> dict[str, str]:
    """
    Extrait les champs imbriqués sous `data` de la query string.

    Exemple : ?data[search_query]=seattle&data[latitude]=47.6
        -> {"search_query": "seattle", "latitude": "47.6"}

    En cas de doublon, la dernière valeur l'emporte.
    """
    fields: dict[str, str] = {}
    for key, value in request.query_params.multi_items():
        match = _DATA_FIELD.match(key)
        if match:
            fields[match.group("bracket") or match.group("dotted")] = value
    return fields
