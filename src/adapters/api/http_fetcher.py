"""
Fetcher HTTP base sur httpx pour les fournisseurs externes.

Implemente IHttpFetcher : un seul client async partage par tous les
adaptateurs, cree a la demande et ferme a l'arret de l'application.
Chaque appel est borne par un timeout et relance sur 429.

Usage:
    fetcher = HttpxFetcher(timeout=10.0)
    payload = await fetcher.fetch_json(OutboundRequest("tmdb", url, params))
    await fetcher.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.retry import RateLimitError, request_with_retry
from src.core.errors import ProviderUnavailable
from src.core.ports.http_fetcher import IHttpFetcher, OutboundRequest

log = logger.bind(component="http")


class HttpxFetcher(IHttpFetcher):
    """
    Client HTTP des fournisseurs.

    Toute erreur (timeout, transport, statut non-2xx, 429 persistant,
    corps non-JSON) est convertie en ProviderUnavailable.
    """

    def __init__(self, timeout: float = 10.0, max_attempts: int = 3) -> None:
        """
        Initialise le fetcher.

        Args:
            timeout: Timeout par requete en secondes
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    async def fetch_json(self, request: OutboundRequest) -> Any:
        client = self._get_client()
        log.debug(f"Appel {request.provider}: {request.url}")
        try:
            response = await request_with_retry(
                client,
                "GET",
                request.url,
                max_attempts=self._max_attempts,
                params=request.params,
            )
        except httpx.TimeoutException as e:
            raise ProviderUnavailable(request.provider, f"timeout apres {self._timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ProviderUnavailable(
                request.provider, f"HTTP {e.response.status_code}"
            ) from e
        except RateLimitError as e:
            raise ProviderUnavailable(request.provider, str(e)) from e
        except httpx.HTTPError as e:
            raise ProviderUnavailable(request.provider, f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderUnavailable(request.provider, "corps de reponse non JSON") from e

    async def close(self) -> None:
        """Ferme le client HTTP s'il est ouvert."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
