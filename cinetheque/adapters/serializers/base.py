"""
Base commune des sérialiseurs de fichiers du catalogue.

Le chargement suit le même algorithme pour tous les formats :
1. Contrôle du chemin (extension unique et attendue, fichier existant)
2. Découpage du contenu en enregistrements, chacun étant analysé
   indépendamment : forme invalide, champ invalide ou doublon produisent
   une ligne d'erreur sans interrompre l'analyse
3. Si au moins une erreur a été relevée, le chargement entier échoue
   avec une AggregatedLoadError ; sinon la liste complète est retournée

Les sous-classes fournissent le découpage, l'analyse d'un enregistrement
et l'encodage.
"""

from abc import abstractmethod
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from cinetheque.core.entities.film import Film, ViewStatus, parse_rating
from cinetheque.core.errors import (
    AggregatedLoadError,
    CatalogFileNotFoundError,
    CatalogIOError,
    DuplicateEntryError,
    FilmValidationError,
    InvalidExtensionError,
    MalformedRecordError,
    MissingViewStatusError,
)
from cinetheque.core.ports.serializer import IFilmSerializer
from cinetheque.utils.constants import (
    FIELD_CATEGORY,
    FIELD_CREATOR,
    FIELD_RATING,
    FIELD_RELEASE_YEAR,
    FIELD_TITLE,
    FIELD_VIEW_STATUS,
    MISSING_TITLE_LABEL,
)

# Champs bruts d'un enregistrement : nom externe -> texte (None si absent/null)
RawRecord = Mapping[str, Optional[str]]


def check_catalog_path(path: Union[str, Path], extension: str) -> Path:
    """
    Vérifie qu'un fichier a une seule extension, égale à celle attendue, et existe.

    Args:
        path: Chemin du fichier
        extension: Extension attendue sans le point (ex: "csv")

    Returns:
        Le chemin sous forme de Path

    Raises:
        InvalidExtensionError: Extension absente, incorrecte ou multiple (x.tar.csv)
        CatalogFileNotFoundError: Fichier inexistant
    """
    file_path = Path(path)
    stem, dot, suffix = file_path.name.rpartition(".")
    if not dot or suffix.casefold() != extension.casefold() or "." in stem:
        logger.warning(f"Format de fichier invalide : {file_path}")
        raise InvalidExtensionError(file_path, extension)
    if not file_path.is_file():
        logger.warning(f"Fichier non trouve : {file_path}")
        raise CatalogFileNotFoundError(file_path)
    return file_path


def build_film(record: RawRecord) -> Film:
    """
    Construit un Film depuis les champs texte d'un enregistrement.

    La note accepte "unrated", "0" ou un entier de 0 à 5 ; le statut accepte
    le nom interne ou le libellé, sans casse.

    Raises:
        FilmValidationError: Si un champ est invalide
    """
    status_text = record.get(FIELD_VIEW_STATUS)
    if status_text is None or not status_text.strip():
        raise MissingViewStatusError()
    return Film(
        title=record.get(FIELD_TITLE),
        director=record.get(FIELD_CREATOR),
        release_year=record.get(FIELD_RELEASE_YEAR),
        genre=record.get(FIELD_CATEGORY),
        rating=parse_rating(record.get(FIELD_RATING)),
        view_status=ViewStatus.parse(status_text),
    )


class BaseFilmSerializer(IFilmSerializer):
    """
    Sérialiseur avec chargement tout-ou-rien et comptabilité d'erreurs par enregistrement.

    Attributs:
        encoding: Encodage des fichiers lus et écrits
    """

    extension: str = ""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    # --------------------
    # Contrat des sous-classes
    # --------------------

    @abstractmethod
    def encode(self, films: Sequence[Film]) -> str:
        """Produit le contenu complet du fichier."""
        ...

    @abstractmethod
    def iter_records(self, content: str) -> Iterator[tuple[int, str]]:
        """
        Découpe le contenu en enregistrements bruts.

        Yields:
            (position 1-based de l'enregistrement, texte brut)

        Raises:
            CatalogIOError: Si la structure globale du fichier est inexploitable
        """
        ...

    @abstractmethod
    def parse_record(self, raw: str) -> RawRecord:
        """
        Extrait les champs texte d'un enregistrement brut.

        Raises:
            MalformedRecordError: Si la forme de l'enregistrement est invalide
        """
        ...

    @abstractmethod
    def record_label(self, position: int) -> str:
        """Libellé de position utilisé dans les messages (ex: "row 3")."""
        ...

    # --------------------
    # Ecriture
    # --------------------

    def save(self, films: Sequence[Film], path: Union[str, Path]) -> None:
        file_path = Path(path)
        # Encode avant ouverture : un caractere non representable ne tronque pas le fichier
        try:
            data = self.encode(films).encode(self.encoding)
        except UnicodeEncodeError as e:
            raise CatalogIOError(f"Unable to write file {file_path}: {e}") from e
        try:
            with open(file_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise CatalogIOError(f"Unable to write file {file_path}: {e}") from e
        logger.info(f"{len(films)} films sauvegardes", path=str(file_path), format=self.extension)

    # --------------------
    # Lecture
    # --------------------

    def load(self, path: Union[str, Path]) -> list[Film]:
        file_path = check_catalog_path(path, self.extension)
        try:
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogIOError(f"Unable to read file {file_path}: {e}") from e

        films: list[Film] = []
        seen: set[tuple[str, str, str]] = set()
        errors: list[str] = []

        for position, raw in self.iter_records(content):
            title: Optional[str] = None
            try:
                record = self.parse_record(raw)
                title = record.get(FIELD_TITLE)
                film = build_film(record)
                if film.identity in seen:
                    raise DuplicateEntryError(film.title)
            except MalformedRecordError as e:
                logger.debug(f"Enregistrement mal forme ({self.record_label(position)}) : {e}")
                errors.append(f"{self.record_label(position)}: {e}")
                continue
            except FilmValidationError as e:
                logger.debug(f"Enregistrement invalide ({self.record_label(position)}) : {e}")
                errors.append(
                    f"{self._tag(position, title)}: invalid or incomplete data ({e})"
                )
                continue
            except DuplicateEntryError as e:
                logger.debug(f"Doublon ({self.record_label(position)}) : {e.title}")
                errors.append(f"{self._tag(position, title)}: {e}")
                continue
            seen.add(film.identity)
            films.append(film)

        if errors:
            logger.warning(
                f"Chargement refuse : {len(errors)} enregistrements invalides",
                path=str(file_path),
            )
            raise AggregatedLoadError(errors, file_path)

        logger.info(f"{len(films)} films charges", path=str(file_path), format=self.extension)
        return films

    def _tag(self, position: int, title: Optional[str]) -> str:
        label = self.record_label(position)
        if title is None:
            return label
        return f"{label} ({title if title.strip() else MISSING_TITLE_LABEL})"
