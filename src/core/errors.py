"""
Taxonomie des erreurs de City Explorer.

Toutes les erreurs metier heritent de CityExplorerError, ce qui permet a la
couche web de les convertir en une reponse 500 unique tout en gardant le type
exact dans les logs et dans l'en-tete X-Error-Type.
"""

from typing import Optional


class CityExplorerError(Exception):
    """Erreur de base de l'application."""


class ProviderUnavailable(CityExplorerError):
    """
    Le fournisseur externe n'a pas pu etre joint.

    Couvre les erreurs reseau, les timeouts, les statuts non-2xx
    et les corps de reponse qui ne sont pas du JSON.

    Attributes:
        provider: Identifiant du fournisseur (ex: "darksky")
        reason: Description courte de la cause
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"Fournisseur {provider} indisponible: {reason}")


class MalformedPayload(CityExplorerError):
    """
    La reponse du fournisseur ne respecte pas le schema attendu.

    Attributes:
        provider: Identifiant du fournisseur
        detail: Champs manquants ou invalides
    """

    def __init__(self, provider: str, detail: str) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"Reponse invalide de {provider}: {detail}")


class NotFound(CityExplorerError):
    """Aucune donnee ne correspond a la demande."""


class NoResultsFound(NotFound):
    """
    Le fournisseur a repondu correctement mais sans aucun resultat.

    Attributes:
        provider: Identifiant du fournisseur
        query: Recherche ayant produit zero resultat
    """

    def __init__(self, provider: str, query: str) -> None:
        self.provider = provider
        self.query = query
        super().__init__(f"Aucun resultat de {provider} pour: {query}")


class PersistenceError(CityExplorerError):
    """
    Echec de lecture ou d'ecriture dans la base.

    Attributes:
        table: Table concernee, si connue
    """

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        self.table = table
        super().__init__(message)
