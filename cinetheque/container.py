"""
Container d'injection de dependances via dependency-injector.

Point de composition unique de l'application : une seule instance de
repository et d'historique est partagee par toutes les interfaces, sans
etat global mutable dans le domaine.
"""

from dependency_injector import containers, providers

from .adapters.serializers import CsvFilmSerializer, JsonFilmSerializer
from .config import Settings
from .core.value_objects import FileFormat
from .infrastructure.persistence import InMemoryFilmRepository
from .services.history import HistoryManager
from .services.videotheque import VideothequeService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.videotheque_service()
        settings = container.config()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Serialiseurs (stateless - Singletons)
    csv_serializer = providers.Singleton(
        CsvFilmSerializer,
        encoding=config.provided.file_encoding,
    )
    json_serializer = providers.Singleton(
        JsonFilmSerializer,
        encoding=config.provided.file_encoding,
    )
    serializers = providers.Dict(
        {
            FileFormat.CSV: csv_serializer,
            FileFormat.JSON: json_serializer,
        }
    )

    # Repository et historique - une instance par application
    film_repository = providers.Singleton(
        InMemoryFilmRepository,
        serializers=serializers,
    )
    history_manager = providers.Singleton(HistoryManager)

    # Facade
    videotheque_service = providers.Singleton(
        VideothequeService,
        repository=film_repository,
        history=history_manager,
    )
