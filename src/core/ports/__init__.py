"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- IHttpFetcher / OutboundRequest : Appels HTTP sortants vers les fournisseurs
- IProviderAdapter : Construction des requêtes et normalisation par type de ressource
- IPersistenceStore : Stockage en ajout seul des localisations et enregistrements
"""

from src.core.ports.http_fetcher import IHttpFetcher, OutboundRequest
from src.core.ports.providers import IProviderAdapter
from src.core.ports.store import IPersistenceStore

__all__ = [
    "IHttpFetcher",
    "OutboundRequest",
    "IProviderAdapter",
    "IPersistenceStore",
]
