"""
Adaptateur TMDB pour les films dont le titre correspond a la localisation.

La recherche porte sur le texte saisi par l'utilisateur ("seattle"),
premiere page uniquement, contenu adulte exclu.
"""

from collections.abc import Mapping
from typing import Any

from src.adapters.providers.base import BaseProviderAdapter
from src.adapters.providers.normalizers import normalize_movie
from src.adapters.providers.schemas import MovieSearchResponse
from src.core.entities import MovieRecord, ResourceType
from src.core.ports.http_fetcher import OutboundRequest


class MoviesAdapter(BaseProviderAdapter[MovieRecord]):
    """Fournisseur de films (TMDB API v3, recherche)."""

    SEARCH_URL = "https://api.themoviedb.org/3/search/movie"

    provider = "tmdb"
    record_type = MovieRecord

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType.MOVIES

    @property
    def table_name(self) -> str:
        return "movies"

    def build_request(self, params: Mapping[str, Any]) -> OutboundRequest:
        return OutboundRequest(
            provider=self.provider,
            url=self.SEARCH_URL,
            params={
                "api_key": self._api_key,
                "language": "en-US",
                "page": "1",
                "include_adult": "false",
                "query": str(params["query"]),
            },
        )

    def parse(self, payload: Any, params: Mapping[str, Any]) -> list[MovieRecord]:
        response = self._validate(MovieSearchResponse, payload)
        return [normalize_movie(movie) for movie in response.results]
