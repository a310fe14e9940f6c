"""
Interface port pour le stockage persistant.

Stockage minimal au-dessus de quatre tables (locations, weather, events,
movies) : recherche par egalite sur une colonne, insertion en ajout seul.
Aucune mise a jour, aucune suppression.
"""

from abc import ABC, abstractmethod
from typing import Any


class IPersistenceStore(ABC):
    """
    Interface de stockage cle/valeur sur tables relationnelles.

    Toute erreur de base est levee sous forme de PersistenceError.
    """

    @abstractmethod
    async def find_by(self, table: str, column: str, value: Any) -> list[dict[str, Any]]:
        """Retourne les lignes de `table` dont `column` vaut `value`, par id croissant."""
        ...

    @abstractmethod
    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Ajoute une ligne et la retourne avec son id attribue."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Ferme la session de la base."""
        ...
