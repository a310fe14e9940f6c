"""
Configuration de la base de donnees pour City Explorer.

Ce module fournit :
- La creation de l'engine (SQLite par defaut, toute URL SQLAlchemy acceptee)
- L'initialisation des tables

Aucun engine global : l'engine est cree une fois par le container DI
et injecte dans le store.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def _is_memory_url(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si besoin.
    Une base SQLite en memoire partage une connexion unique (StaticPool)
    pour rester visible depuis le thread du store.

    Args:
        database_url: URL SQLAlchemy (ex: sqlite:///cityexplorer.db)

    Returns:
        Engine configure
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    if _is_memory_url(database_url):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_path = Path(database_url.replace("sqlite:///", "", 1))
    db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug(f"Tables initialisees sur {engine.url.render_as_string(hide_password=True)}")
