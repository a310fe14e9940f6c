"""
Relance avec backoff exponentiel pour les fournisseurs externes.

Seules les reponses 429 (rate limiting) sont relancees, avec un delai
croissant et du jitter aleatoire. Les autres erreurs HTTP remontent
immediatement : l'appelant les convertit en ProviderUnavailable.

Usage:
    @with_retry(max_attempts=3, max_wait=10)
    async def appel_fournisseur():
        ...

    response = await request_with_retry(client, "GET", url, params=params)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand le fournisseur retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After en secondes (la forme date HTTP est ignoree)."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def with_retry(max_attempts: int = 3, max_wait: int = 10):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes

    Returns:
        Decorateur tenacity; la derniere RateLimitError est relevee telle quelle
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: int = 10,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en relancant sur 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes
        **kwargs: Arguments passes a client.request() (params, headers...)

    Returns:
        La reponse 2xx

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres statuts non-2xx
        httpx.HTTPError: Pour les erreurs de transport et les timeouts
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
