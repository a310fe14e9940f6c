"""
Interface port pour les appels HTTP sortants.

Le domaine ne connait que la description d'une requete (URL + parametres)
et le JSON decode en retour. Le client reseau concret est fourni par
un adaptateur (httpx dans src/adapters/api/).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OutboundRequest:
    """
    Description d'une requete GET vers un fournisseur externe.

    Attributs :
        provider : Identifiant du fournisseur (pour les logs et les erreurs)
        url : URL complete de l'endpoint
        params : Parametres de la query string
    """

    provider: str
    url: str
    params: dict[str, str] = field(default_factory=dict)


class IHttpFetcher(ABC):
    """
    Capacite opaque d'appel HTTP.

    Les implementations levent ProviderUnavailable pour toute erreur
    reseau, timeout, statut non-2xx ou corps non-JSON.
    """

    @abstractmethod
    async def fetch_json(self, request: OutboundRequest) -> Any:
        """
        Execute la requete et retourne le corps JSON decode.

        Args :
            request : Requete a executer

        Retourne :
            Le JSON decode (dict ou liste)
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...
