"""
Adaptateur Google Geocoding pour la resolution des localisations.

Transforme une recherche libre ("seattle") en Location avec adresse
formatee et coordonnees. Seul le premier resultat est retenu par
le LocationResolver.
"""

from collections.abc import Mapping
from typing import Any

from src.adapters.providers.base import BaseProviderAdapter
from src.adapters.providers.normalizers import normalize_location
from src.adapters.providers.schemas import GeocodeResponse
from src.core.entities import Location, ResourceType
from src.core.errors import ProviderUnavailable
from src.core.ports.http_fetcher import OutboundRequest

# Statuts Google signalant une reponse exploitable
_OK_STATUSES = frozenset({"OK", "ZERO_RESULTS"})


class LocationAdapter(BaseProviderAdapter[Location]):
    """Fournisseur de geocodage (Google Maps Geocoding API)."""

    GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

    provider = "google-geocode"
    record_type = Location

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.LOCATION

    @property
    def table_name(self) -> str:
        return "locations"

    def build_request(self, params: Mapping[str, Any]) -> OutboundRequest:
        return OutboundRequest(
            provider=self.provider,
            url=self.GEOCODE_URL,
            params={"address": str(params["query"]), "key": self._api_key},
        )

    def parse(self, payload: Any, params: Mapping[str, Any]) -> list[Location]:
        """
        Normalise les resultats de geocodage.

        Un statut Google d'erreur (REQUEST_DENIED, OVER_QUERY_LIMIT...)
        est remonte comme ProviderUnavailable : la reponse est bien formee
        mais le fournisseur a refuse de la servir.
        """
        response = self._validate(GeocodeResponse, payload)
        if response.status is not None and response.status not in _OK_STATUSES:
            reason = response.status
            if response.error_message:
                reason = f"{reason} ({response.error_message})"
            raise ProviderUnavailable(self.provider, reason)

        query = str(params["query"])
        return [normalize_location(query, result) for result in response.results]
