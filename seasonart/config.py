"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SEASONART_,
et peut optionnellement être fournie via un fichier .env.

L'API publique TVmaze ne demande pas de clé : seuls l'URL, les timeouts
et la politique de retry sur rate limiting sont configurables.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seasonart.adapters.api.retry import RetryPolicy

# Trouver le fichier .env à la racine du projet (parent de seasonart/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SEASONART_.
    Exemple : SEASONART_RETRY_MAX_ATTEMPTS=3
    """

    model_config = SettingsConfigDict(
        env_prefix="SEASONART_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TVmaze
    tvmaze_base_url: str = Field(default="https://api.tvmaze.com")
    http_timeout: float = Field(default=30.0, gt=0)
    http_connect_timeout: float = Field(default=10.0, gt=0)
    user_agent: Optional[str] = Field(default="seasonart/0.1.0")

    # Retry sur rate limiting (429)
    retry_max_attempts: int = Field(default=5, ge=1)
    retry_base_delay: float = Field(default=1.0, gt=0)
    retry_max_delay: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/seasonart.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tvmaze_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le / final pour composer les chemins de l'API."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def check_retry_delays(self) -> "Settings":
        """Le plafond du backoff ne peut pas être inférieur au délai de base."""
        if self.retry_max_delay < self.retry_base_delay:
            raise ValueError("retry_max_delay must be >= retry_base_delay")
        return self

    def retry_policy(self) -> RetryPolicy:
        """Construit la politique de retry à partir des paramètres."""
        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            base_delay=self.retry_base_delay,
            max_delay=self.retry_max_delay,
        )
