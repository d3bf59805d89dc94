"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/providers/dependency.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.event_status.app.interface.i_last_event_query_repo import ILastEventQueryRepo
from src.service.event_status.app.query.check_last_event_status_use_case import (
    CheckLastEventStatusUseCase,
    utc_now,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Time source, overridden in tests to pin "now"
    clock = providers.Object(utc_now)

    # Repositories (provided by the host application)
    last_event_query_repo = providers.Dependency(instance_of=ILastEventQueryRepo)

    # Use cases
    check_last_event_status_use_case = providers.Factory(
        CheckLastEventStatusUseCase,
        last_event_query_repo=last_event_query_repo,
        clock=clock,
    )


container = Container()
