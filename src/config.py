"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CITYEXPLORER_,
et peut optionnellement être fournie via un fichier .env.

Les clés API des fournisseurs sont optionnelles : sans clé, le fournisseur répond
par une erreur d'authentification, remontée comme ProviderUnavailable.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CITYEXPLORER_.
    Exemple : CITYEXPLORER_WEATHER_API_KEY=xxxx
    """

    model_config = SettingsConfigDict(
        env_prefix="CITYEXPLORER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cityexplorer.db")

    # Clés API fournisseurs
    geocode_api_key: Optional[str] = Field(default=None)
    weather_api_key: Optional[str] = Field(default=None)
    eventbrite_api_key: Optional[str] = Field(default=None)
    movie_api_key: Optional[str] = Field(default=None)

    # Recherche utilisée par /location quand aucune n'est fournie
    default_location: str = Field(default="seattle")

    # Appels fournisseurs
    provider_timeout_seconds: float = Field(default=10.0, gt=0)
    provider_max_attempts: int = Field(default=3, ge=1)

    # Regroupe les cache miss concurrents sur une même clé (désactivé : comportement historique)
    dedupe_inflight: bool = Field(default=False)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cityexplorer.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def geocode_enabled(self) -> bool:
        """Vérifie si l'API de géocodage est configurée."""
        return self.geocode_api_key is not None

    @property
    def weather_enabled(self) -> bool:
        """Vérifie si l'API météo est configurée."""
        return self.weather_api_key is not None

    @property
    def events_enabled(self) -> bool:
        """Vérifie si l'API Eventbrite est configurée."""
        return self.eventbrite_api_key is not None

    @property
    def movies_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.movie_api_key is not None
