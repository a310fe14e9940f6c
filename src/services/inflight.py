"""
Regroupement des appels concurrents sur une meme cle.

Quand plusieurs requetes manquent le cache pour la meme cle au meme moment,
seule la premiere execute le travail; les autres attendent son resultat
(ou son exception). La cle est liberee des que le travail se termine.
"""

import asyncio
from collections.abc import Awaitable, Callable, Hashable
from typing import Generic, TypeVar

from src.core.errors import CityExplorerError

T = TypeVar("T")


class InflightRegistry(Generic[T]):
    """Un futur partage par cle en cours de traitement."""

    def __init__(self) -> None:
        self._pending: dict[Hashable, asyncio.Future[T]] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._pending

    async def run(self, key: Hashable, factory: Callable[[], Awaitable[T]]) -> T:
        """
        Execute factory() une seule fois pour tous les appels concurrents sur key.

        Args:
            key: Cle de regroupement
            factory: Fabrique de la coroutine a executer

        Returns:
            Le resultat partage
        """
        pending = self._pending.get(key)
        if pending is not None:
            # shield : l'annulation d'un appelant n'annule pas le travail partage
            return await asyncio.shield(pending)

        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._pending[key] = future
        try:
            result = await factory()
        except asyncio.CancelledError:
            # Les appelants en attente ne sont pas annules : ils recoivent une erreur metier
            future.set_exception(
                CityExplorerError(f"Traitement partage interrompu pour la cle {key!r}")
            )
            future.exception()
            raise
        except Exception as exc:
            future.set_exception(exc)
            # Marque l'exception comme lue si aucun autre appelant n'attend
            future.exception()
            raise
        else:
            future.set_result(result)
            return result
        finally:
            del self._pending[key]
