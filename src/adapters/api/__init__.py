"""
Client HTTP partage pour les fournisseurs externes.

Infrastructure partagee:
- HttpxFetcher: implementation de IHttpFetcher sur httpx.AsyncClient
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: backoff exponentiel sur rate limiting

Les adaptateurs de fournisseurs (src/adapters/providers/) decrivent les
requetes; ce module les execute.
"""

from src.adapters.api.http_fetcher import HttpxFetcher
from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "HttpxFetcher",
    "RateLimitError",
    "with_retry",
    "request_with_retry",
]
