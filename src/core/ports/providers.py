"""
Interface port pour les adaptateurs de fournisseurs.

Chaque type de ressource (localisation, meteo, evenements, films) dispose
d'un adaptateur qui sait construire la requete vers son fournisseur,
valider et normaliser la reponse, et convertir les enregistrements
vers et depuis les lignes de sa table.

L'orchestrateur cache-aside ne manipule que cette interface : il ne contient
aucun branchement par type de ressource.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from src.core.entities.records import ResourceType
from src.core.ports.http_fetcher import OutboundRequest

R = TypeVar("R")


class IProviderAdapter(ABC, Generic[R]):
    """
    Capacites d'un fournisseur pour un type de ressource.

    Type parametre R : l'enregistrement canonique produit (Location,
    WeatherRecord, EventRecord ou MovieRecord).
    """

    @property
    @abstractmethod
    def resource_type(self) -> ResourceType:
        """Type de ressource servi par cet adaptateur."""
        ...

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Nom de la table de stockage des enregistrements."""
        ...

    @abstractmethod
    def build_request(self, params: Mapping[str, Any]) -> OutboundRequest:
        """
        Construit la requete sortante vers le fournisseur.

        Args :
            params : Parametres de la demande (query, latitude, longitude...)

        Retourne :
            La requete a executer
        """
        ...

    @abstractmethod
    def parse(self, payload: Any, params: Mapping[str, Any]) -> list[R]:
        """
        Valide la reponse brute et la normalise en enregistrements.

        Args :
            payload : JSON decode renvoye par le fournisseur
            params : Parametres de la demande d'origine

        Retourne :
            Les enregistrements normalises, dans l'ordre du fournisseur

        Leve :
            MalformedPayload : si un champ attendu est absent ou invalide
        """
        ...

    @abstractmethod
    def to_row(self, record: R) -> dict[str, Any]:
        """Convertit un enregistrement en ligne a inserer (sans id)."""
        ...

    @abstractmethod
    def from_row(self, row: Mapping[str, Any]) -> R:
        """Convertit une ligne stockee en enregistrement."""
        ...
