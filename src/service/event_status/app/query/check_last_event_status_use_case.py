from datetime import datetime, timezone
from typing import Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_status.app.interface.i_last_event_query_repo import ILastEventQueryRepo
from src.service.event_status.domain.enum.event_status import EventStatus
from src.service.event_status.domain.event_status_classifier import EventStatusClassifier


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckLastEventStatusUseCase:
    """
    Check the status of a group's last event.

    Flow:
    1. Load the group's last event (single repository call, no retry)
    2. Read the current time
    3. Classify: ACTIVE / IN_REVIEW / CLOSED

    Repository failures are not caught here and reach the caller as raised.
    A group without events is CLOSED, not an error.
    """

    def __init__(
        self,
        *,
        last_event_query_repo: ILastEventQueryRepo,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.last_event_query_repo = last_event_query_repo
        self.clock = clock or utc_now

    @Logger.io
    async def execute(self, *, group_id: str) -> EventStatus:
        event = await self.last_event_query_repo.get_last_event(group_id=group_id)
        if event is None:
            Logger.base.info(f'📭 [EVENT_STATUS] Group {group_id} has no event')

        status = EventStatusClassifier.classify(event, self.clock())

        Logger.base.info(f'✅ [EVENT_STATUS] Group {group_id} last event is {status}')
        return status
