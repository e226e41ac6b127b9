from dependency_injector import containers, providers

from kasten.application.learning.use_cases.progress_use_case import ProgressUseCase
from kasten.application.learning.use_cases.record_answer_use_case import RecordAnswerUseCase
from kasten.config import Settings, get_settings
from kasten.infrastructure.couchdb.client import CouchDBClient
from kasten.infrastructure.learning.repositories import (
    ProgressRepository,
    ProgressViewRepository,
    ProgressViews,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare settings as a dependency that will be provided at runtime
    settings = providers.Dependency(instance_of=Settings)

    # Store connection and view locations, shared by every repository
    couchdb_client = providers.Singleton(CouchDBClient.from_settings, settings=settings)
    progress_views = providers.Singleton(ProgressViews.from_settings, settings=settings)

    # Repositories
    progress_repository = providers.Factory(ProgressRepository, client=couchdb_client)
    progress_view_repository = providers.Factory(
        ProgressViewRepository,
        client=couchdb_client,
        views=progress_views,
    )

    # Learning module, application use cases
    progress_use_case = providers.Factory(
        ProgressUseCase,
        progress_repository=progress_repository,
        progress_view_repository=progress_view_repository,
    )
    record_answer_use_case = providers.Factory(
        RecordAnswerUseCase,
        progress_use_case=progress_use_case,
    )


def create_container(settings: Settings | None = None) -> Container:
    """
    Build a container bound to the given settings.

    Create one per process at startup and hand it to whatever needs the use
    cases. Call ``container.couchdb_client().close()`` on shutdown.
    """
    container = Container()
    container.settings.override(settings or get_settings())
    return container
