"""
Resolution d'une recherche libre en Location persistee.

La Location est l'entite racine : toutes les ressources (meteo, evenements,
films) y sont rattachees par location_id. Elle est creee au premier appel
pour une recherche donnee, puis relue telle quelle.
"""

from loguru import logger

from src.core.entities import Location
from src.core.errors import NoResultsFound, PersistenceError
from src.core.ports.http_fetcher import IHttpFetcher
from src.core.ports.providers import IProviderAdapter
from src.core.ports.store import IPersistenceStore
from src.services.inflight import InflightRegistry


class LocationResolver:
    """
    Service de resolution des localisations (cache-aside sur la table locations).

    - Hit : retourne la ligne stockee, aucun appel au geocodeur
    - Miss : geocode, retient le premier resultat, l'insere et le retourne
    """

    def __init__(
        self,
        store: IPersistenceStore,
        fetcher: IHttpFetcher,
        adapter: IProviderAdapter[Location],
        dedupe_inflight: bool = False,
    ) -> None:
        """
        Initialise le resolver.

        Args:
            store: Store persistant
            fetcher: Client HTTP des fournisseurs
            adapter: Adaptateur du geocodeur
            dedupe_inflight: Regroupe les resolutions concurrentes d'une meme recherche
        """
        self._store = store
        self._fetcher = fetcher
        self._adapter = adapter
        self._inflight: InflightRegistry[Location] | None = (
            InflightRegistry() if dedupe_inflight else None
        )

    async def resolve(self, query: str) -> Location:
        """
        Retourne la Location correspondant exactement a `query`.

        Args:
            query: Recherche libre, comparee telle quelle (pas de normalisation)

        Returns:
            La Location persistee avec son id, ou la Location geocodee sans id
            si elle n'a pas pu etre stockee

        Raises:
            ProviderUnavailable: Geocodeur injoignable
            MalformedPayload: Reponse du geocodeur inattendue
            NoResultsFound: Aucun resultat pour la recherche
            PersistenceError: Lecture initiale impossible
        """
        if self._inflight is None:
            return await self._resolve(query)
        return await self._inflight.run(query, lambda: self._resolve(query))

    async def _find(self, query: str) -> Location | None:
        rows = await self._store.find_by(self._adapter.table_name, "search_query", query)
        return self._adapter.from_row(rows[0]) if rows else None

    async def _resolve(self, query: str) -> Location:
        stored = await self._find(query)
        if stored is not None:
            logger.debug(f"Localisation servie depuis la base: {query}")
            return stored

        params = {"query": query}
        request = self._adapter.build_request(params)
        logger.info(f"Geocodage de '{query}' via {request.provider}")
        payload = await self._fetcher.fetch_json(request)

        candidates = self._adapter.parse(payload, params)
        if not candidates:
            raise NoResultsFound(request.provider, query)

        location = candidates[0]
        try:
            row = await self._store.insert(self._adapter.table_name, self._adapter.to_row(location))
        except PersistenceError as e:
            # Une requete concurrente a pu inserer la meme recherche (search_query unique)
            existing = await self._find(query)
            if existing is not None:
                logger.warning(f"Localisation '{query}' deja inseree par une requete concurrente")
                return existing
            logger.error(f"Localisation '{query}' non stockee, servie sans id: {e}")
            return location

        return self._adapter.from_row(row)
