"""
Application FastAPI de City Explorer.

Initialise l'application web avec le Container DI, active CORS pour toutes
les origines, monte les routes et convertit les erreurs en réponses texte.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..container import Container
from ..core.errors import CityExplorerError
from .routes.location import router as location_router
from .routes.resources import router as resources_router

FALLBACK_BODY = "You got in the wrong place"
SERVER_ERROR_BODY = "Status 500: So sorry i broke"


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container à utiliser (les tests y injectent leurs overrides);
            un Container neuf est créé au démarrage si None.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage; ferme le client HTTP et le store à l'arrêt."""
        app_container = container or Container()
        app_container.database.init()
        app.state.container = app_container
        yield
        await app_container.http_fetcher().close()
        app_container.shutdown_resources()

    app = FastAPI(title="City Explorer", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CityExplorerError)
    async def handle_domain_error(request: Request, exc: CityExplorerError) -> PlainTextResponse:
        logger.error(f"{request.method} {request.url.path} en échec: {exc}")
        return PlainTextResponse(
            SERVER_ERROR_BODY,
            status_code=500,
            headers={"X-Error-Type": type(exc).__name__},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        # Chemin ou méthode non servis : corps fixe
        if exc.status_code in (404, 405):
            return PlainTextResponse(FALLBACK_BODY, status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    app.include_router(location_router)
    app.include_router(resources_router)
    return app


app = create_app()
