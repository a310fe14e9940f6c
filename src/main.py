"""
Point d'entrée CLI de City Explorer.

Initialise le container DI, configure le logging et fournit les commandes CLI :
serveur web, configuration, et appels directs aux services (résolution
de localisation, lecture cache-aside d'une ressource).
"""

import asyncio
from dataclasses import asdict
from typing import Annotated, Any

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .core.entities import ResourceType
from .core.errors import CityExplorerError
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="cityexplorer",
    help="Agrégateur de données géolocalisées (météo, événements, films)",
)
container = Container()
console = Console()

# Types servis par l'orchestrateur (la localisation a sa propre commande)
_FETCHABLE = [t.value for t in ResourceType if t is not ResourceType.LOCATION]


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _render_table(title: str, rows: list[dict[str, Any]]) -> Table:
    """Construit une table rich à partir d'une liste de dictionnaires homogènes."""
    table = Table(title=title)
    if not rows:
        return table
    for column in rows[0]:
        table.add_column(column)
    for row in rows:
        table.add_row(*(str(value) for value in row.values()))
    return table


async def _shutdown() -> None:
    await container.http_fetcher().close()
    container.shutdown_resources()


async def _location_async(query: str) -> dict[str, Any]:
    container.database.init()
    try:
        location = await container.location_resolver().resolve(query)
        return asdict(location)
    finally:
        await _shutdown()


async def _fetch_async(resource_type: ResourceType, query: str) -> list[dict[str, Any]]:
    container.database.init()
    try:
        location = await container.location_resolver().resolve(query)
        records = await container.orchestrator().fetch(
            location.id,
            resource_type,
            {"query": query, "latitude": location.latitude, "longitude": location.longitude},
        )
        return [asdict(record) for record in records]
    finally:
        await _shutdown()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration City Explorer")

    def _status(enabled: bool) -> str:
        return "activée" if enabled else "désactivée"

    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"API géocodage : {_status(config.geocode_enabled)}")
    typer.echo(f"API météo : {_status(config.weather_enabled)}")
    typer.echo(f"API événements : {_status(config.events_enabled)}")
    typer.echo(f"API films : {_status(config.movies_enabled)}")
    typer.echo(f"Timeout fournisseurs : {config.provider_timeout_seconds}s")
    typer.echo(f"Regroupement des miss concurrents : {_status(config.dedupe_inflight)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"City Explorer v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables manquantes."""
    container.database.init()
    typer.echo(f"Base initialisée : {get_config().database_url}")


@app.command()
def location(
    query: Annotated[str, typer.Argument(help="Recherche libre (ex: seattle)")],
) -> None:
    """Résout une recherche en localisation (géocode au premier appel)."""
    try:
        result = asyncio.run(_location_async(query))
    except CityExplorerError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)
    console.print(_render_table(f"Localisation '{query}'", [result]))


@app.command()
def fetch(
    resource: Annotated[
        str, typer.Argument(help=f"Type de ressource ({', '.join(_FETCHABLE)})")
    ],
    query: Annotated[str, typer.Argument(help="Recherche libre (ex: seattle)")],
) -> None:
    """Affiche une ressource pour une localisation (base d'abord, fournisseur sinon)."""
    if resource not in _FETCHABLE:
        console.print(f"[red]Type inconnu :[/red] {resource} (attendu : {', '.join(_FETCHABLE)})")
        raise typer.Exit(code=2)

    try:
        rows = asyncio.run(_fetch_async(ResourceType(resource), query))
    except CityExplorerError as e:
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)
    console.print(_render_table(f"{resource} pour '{query}'", rows))
    typer.echo(f"Total : {len(rows)}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 3001,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web City Explorer."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de City Explorer", version=__version__)

    app()


if __name__ == "__main__":
    main()
