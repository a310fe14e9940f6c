"""
Orchestrateur cache-aside des ressources rattachees a une localisation.

Pour un couple (location_id, type de ressource) :
- des lignes existent : elles sont retournees telles quelles, sans appel reseau
- aucune ligne : le fournisseur est appele, la reponse normalisee, chaque
  enregistrement insere, et la sequence fraichement normalisee retournee

Aucune expiration : une fois stockees, les lignes sont servies indefiniment.

Les echecs d'insertion apres un appel reussi sont journalises puis ignores :
l'appelant recoit ses donnees meme si elles n'ont pas pu etre stockees
(la prochaine requete refera alors l'appel au fournisseur).
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from loguru import logger

from src.core.entities import ResourceType
from src.core.errors import PersistenceError
from src.core.ports.http_fetcher import IHttpFetcher
from src.core.ports.providers import IProviderAdapter
from src.core.ports.store import IPersistenceStore
from src.services.inflight import InflightRegistry


class CacheAsideOrchestrator:
    """
    Service generique de lecture cache-aside.

    Ne contient aucun branchement par type : l'adaptateur est choisi dans
    le mapping fourni a la construction, puis utilise via IProviderAdapter.
    """

    def __init__(
        self,
        store: IPersistenceStore,
        fetcher: IHttpFetcher,
        adapters: Mapping[ResourceType, IProviderAdapter],
        dedupe_inflight: bool = False,
    ) -> None:
        """
        Initialise l'orchestrateur.

        Args:
            store: Store persistant
            fetcher: Client HTTP des fournisseurs
            adapters: Adaptateur par type de ressource
            dedupe_inflight: Regroupe les cache miss concurrents d'une meme cle.
                Desactive, deux requetes simultanees peuvent toutes deux appeler
                le fournisseur et inserer des lignes en double.
        """
        self._store = store
        self._fetcher = fetcher
        self._adapters = dict(adapters)
        self._inflight: InflightRegistry[list[Any]] | None = (
            InflightRegistry() if dedupe_inflight else None
        )

    def _adapter_for(self, resource_type: ResourceType) -> IProviderAdapter:
        try:
            return self._adapters[resource_type]
        except KeyError:
            raise ValueError(f"Aucun adaptateur pour le type {resource_type}") from None

    async def fetch(
        self,
        location_id: int,
        resource_type: ResourceType,
        provider_params: Mapping[str, Any],
    ) -> list[Any]:
        """
        Retourne les enregistrements d'un type pour une localisation.

        Args:
            location_id: Id de la Location
            resource_type: Type de ressource demande
            provider_params: Parametres transmis a l'adaptateur en cas de miss
                (query, latitude, longitude)

        Returns:
            Les lignes stockees (hit) ou les enregistrements fraichement normalises (miss)

        Raises:
            ProviderUnavailable: Fournisseur injoignable (rien n'est insere)
            MalformedPayload: Reponse inattendue (rien n'est insere)
            PersistenceError: Lecture initiale impossible
            ValueError: Aucun adaptateur pour ce type
        """
        adapter = self._adapter_for(resource_type)
        if self._inflight is None:
            return await self._load_or_fetch(adapter, location_id, provider_params)
        return await self._inflight.run(
            (location_id, resource_type),
            lambda: self._load_or_fetch(adapter, location_id, provider_params),
        )

    async def _load_or_fetch(
        self,
        adapter: IProviderAdapter,
        location_id: int,
        provider_params: Mapping[str, Any],
    ) -> list[Any]:
        rows = await self._store.find_by(adapter.table_name, "location_id", location_id)
        if rows:
            logger.debug(
                f"Cache hit {adapter.resource_type.value} location_id={location_id} "
                f"({len(rows)} lignes)"
            )
            return [adapter.from_row(row) for row in rows]

        return await self._fetch_and_store(adapter, location_id, provider_params)

    async def _fetch_and_store(
        self,
        adapter: IProviderAdapter,
        location_id: int,
        provider_params: Mapping[str, Any],
    ) -> list[Any]:
        request = adapter.build_request(provider_params)
        logger.info(
            f"Cache miss {adapter.resource_type.value} location_id={location_id}, "
            f"appel {request.provider}"
        )
        payload = await self._fetcher.fetch_json(request)
        records = [
            replace(record, location_id=location_id)
            for record in adapter.parse(payload, provider_params)
        ]

        failed = 0
        for record in records:
            try:
                await self._store.insert(adapter.table_name, adapter.to_row(record))
            except PersistenceError as e:
                failed += 1
                logger.error(f"Insertion ignoree dans {adapter.table_name}: {e}")

        if failed:
            logger.warning(
                f"{failed}/{len(records)} enregistrements {adapter.resource_type.value} "
                f"non stockes pour location_id={location_id}"
            )
        return records
