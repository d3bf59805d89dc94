"""
Event Status Classifier

Maps a group's last event and a reference time onto an EventStatus:

    now <= end_date                      -> ACTIVE
    end_date < now <= review_end_date    -> IN_REVIEW
    otherwise (or no event at all)       -> CLOSED

Both boundaries are inclusive.
"""

from datetime import datetime
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.event_status.domain.entity.event_entity import EventEntity
from src.service.event_status.domain.enum.event_status import EventStatus


class EventStatusClassifier:
    @staticmethod
    @Logger.io
    def classify(event: Optional[EventEntity], now: datetime) -> EventStatus:
        if event is None:
            return EventStatus.CLOSED

        if now <= event.end_date:
            return EventStatus.ACTIVE

        if now <= event.review_end_date:
            return EventStatus.IN_REVIEW

        return EventStatus.CLOSED
