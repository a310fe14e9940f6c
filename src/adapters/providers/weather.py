"""
Adaptateur Dark Sky pour les previsions meteo quotidiennes.

La cle API fait partie du chemin de l'URL, suivie des coordonnees.
"""

from collections.abc import Mapping
from typing import Any

from src.adapters.providers.base import BaseProviderAdapter
from src.adapters.providers.normalizers import normalize_weather
from src.adapters.providers.schemas import ForecastResponse
from src.core.entities import ResourceType, WeatherRecord
from src.core.ports.http_fetcher import OutboundRequest


class WeatherAdapter(BaseProviderAdapter[WeatherRecord]):
    """Fournisseur meteo (Dark Sky Forecast API)."""

    FORECAST_URL = "https://api.darksky.net/forecast"

    provider = "darksky"
    record_type = WeatherRecord

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.WEATHER

    @property
    def table_name(self) -> str:
        return "weather"

    def build_request(self, params: Mapping[str, Any]) -> OutboundRequest:
        coordinates = f"{params['latitude']},{params['longitude']}"
        return OutboundRequest(
            provider=self.provider,
            url=f"{self.FORECAST_URL}/{self._api_key}/{coordinates}",
        )

    def parse(self, payload: Any, params: Mapping[str, Any]) -> list[WeatherRecord]:
        response = self._validate(ForecastResponse, payload)
        return [normalize_weather(day) for day in response.daily.data]
