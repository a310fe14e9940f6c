"""
Implementation SQLModel du store persistant.

Une seule session est ouverte pour toute la duree du processus. Toutes les
operations sur cette session passent par un executeur a un seul thread :
elles sont serialisees, et les coroutines appelantes ne bloquent jamais
la boucle asyncio pendant les acces disque.

Usage:
    store = SQLModelPersistenceStore(engine)
    rows = await store.find_by("weather", "location_id", 1)
    row = await store.insert("weather", {"forecast": "Clear", ...})
    store.close()
"""

import asyncio
from collections.abc import Callable, Generator
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Optional, TypeVar

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from src.core.errors import PersistenceError
from src.core.ports.store import IPersistenceStore
from src.infrastructure.persistence.models import TABLE_MODELS

log = logger.bind(component="store")

T = TypeVar("T")


class SQLModelPersistenceStore(IPersistenceStore):
    """
    Store en ajout seul sur les tables locations, weather, events, movies.

    Les noms de table et de colonne sont verifies contre les modeles
    declares : aucune requete n'est construite a partir de texte libre.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le store et ouvre la session du processus.

        Args:
            engine: Engine SQLAlchemy dont les tables sont deja creees
        """
        self._session: Optional[Session] = Session(engine)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="store")

    def _model_for(self, table: str) -> type[SQLModel]:
        try:
            return TABLE_MODELS[table]
        except KeyError:
            raise PersistenceError(f"Table inconnue: {table}", table=table) from None

    def _require_session(self) -> Session:
        if self._session is None:
            raise PersistenceError("Store ferme")
        return self._session

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        self._require_session()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, partial(func, *args))

    async def find_by(self, table: str, column: str, value: Any) -> list[dict[str, Any]]:
        return await self._run(self._find_by_sync, table, column, value)

    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        return await self._run(self._insert_sync, table, row)

    def _find_by_sync(self, table: str, column: str, value: Any) -> list[dict[str, Any]]:
        model = self._model_for(table)
        if column not in model.model_fields:
            raise PersistenceError(f"Colonne inconnue: {table}.{column}", table=table)

        session = self._require_session()
        statement = select(model).where(getattr(model, column) == value).order_by(model.id)
        try:
            results = session.exec(statement).all()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Lecture impossible dans {table}: {e}", table=table) from e
        return [result.model_dump() for result in results]

    def _insert_sync(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        model = self._model_for(table)
        values = {key: value for key, value in row.items() if key != "id"}
        unknown = set(values) - set(model.model_fields)
        if unknown:
            raise PersistenceError(
                f"Colonnes inconnues pour {table}: {', '.join(sorted(unknown))}", table=table
            )

        session = self._require_session()
        instance = model(**values)
        try:
            session.add(instance)
            session.commit()
            session.refresh(instance)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Insertion impossible dans {table}: {e}", table=table) from e
        return instance.model_dump()

    def close(self) -> None:
        """Ferme la session puis arrete le thread du store."""
        if self._session is None:
            return
        session, self._session = self._session, None
        self._executor.submit(session.close).result()
        self._executor.shutdown(wait=True)
        log.debug("Store ferme")


def open_store(engine: Engine) -> Generator[SQLModelPersistenceStore, None, None]:
    """
    Ressource DI : ouvre le store au demarrage, le ferme a l'arret.

    Yields:
        Le store du processus
    """
    store = SQLModelPersistenceStore(engine)
    try:
        yield store
    finally:
        store.close()
