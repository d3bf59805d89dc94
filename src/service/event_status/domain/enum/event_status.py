from enum import StrEnum


class EventStatus(StrEnum):
    """Lifecycle status of a group's last event, computed on every query"""

    CLOSED = 'closed'
    ACTIVE = 'active'
    IN_REVIEW = 'in_review'
