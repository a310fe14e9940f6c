"""
Adaptateur Eventbrite pour les evenements autour d'une localisation.
"""

from collections.abc import Mapping
from typing import Any

from src.adapters.providers.base import BaseProviderAdapter
from src.adapters.providers.normalizers import normalize_event
from src.adapters.providers.schemas import EventSearchResponse
from src.core.entities import EventRecord, ResourceType
from src.core.ports.http_fetcher import OutboundRequest


class EventsAdapter(BaseProviderAdapter[EventRecord]):
    """Fournisseur d'evenements (Eventbrite API v3)."""

    SEARCH_URL = "https://www.eventbriteapi.com/v3/events/search/"

    provider = "eventbrite"
    record_type = EventRecord

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.EVENTS

    @property
    def table_name(self) -> str:
        return "events"

    def build_request(self, params: Mapping[str, Any]) -> OutboundRequest:
        return OutboundRequest(
            provider=self.provider,
            url=self.SEARCH_URL,
            params={
                "token": self._api_key,
                "location.latitude": str(params["latitude"]),
                "location.longitude": str(params["longitude"]),
            },
        )

    def parse(self, payload: Any, params: Mapping[str, Any]) -> list[EventRecord]:
        response = self._validate(EventSearchResponse, payload)
        return [normalize_event(event) for event in response.events]
