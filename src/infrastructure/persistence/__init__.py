"""
Module de persistance pour City Explorer.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine et initialisation des tables
- models.py : Modeles SQLModel representant les tables
- store.py : Store en ajout seul (session unique, thread dedie)

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db
    from src.infrastructure.persistence import SQLModelPersistenceStore

    engine = create_db_engine("sqlite:///cityexplorer.db")
    init_db(engine)
    store = SQLModelPersistenceStore(engine)
"""

from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import (
    TABLE_MODELS,
    EventModel,
    LocationModel,
    MovieModel,
    WeatherModel,
)
from src.infrastructure.persistence.store import SQLModelPersistenceStore, open_store

__all__ = [
    "create_db_engine",
    "init_db",
    "open_store",
    "SQLModelPersistenceStore",
    "TABLE_MODELS",
    "LocationModel",
    "WeatherModel",
    "EventModel",
    "MovieModel",
]
