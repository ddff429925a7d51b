"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINETHEQUE_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinetheque.core.value_objects import FileFormat

# Trouver le fichier .env a la racine du projet (parent de cinetheque/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINETHEQUE_.
    Exemple : CINETHEQUE_CATALOG_FILE=~/films.csv

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINETHEQUE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalogue
    catalog_file: Path = Field(default=Path("~/.cinetheque/catalogue.json"))
    default_format: FileFormat = Field(default=FileFormat.JSON)
    file_encoding: str = Field(default="utf-8")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("logs/cinetheque.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("catalog_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("default_format", mode="before")
    @classmethod
    def parse_format(cls, v: str | FileFormat) -> FileFormat:
        """Accepte "csv" / "JSON" / ".json" sans tenir compte de la casse."""
        return FileFormat.parse(v)

    @property
    def catalog_format(self) -> FileFormat:
        """Format déduit de l'extension du catalogue, sinon le format par défaut."""
        return FileFormat.from_path(self.catalog_file, self.default_format)
