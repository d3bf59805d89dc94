from abc import ABC, abstractmethod
from typing import Optional

from src.service.event_status.domain.entity.event_entity import EventEntity


class ILastEventQueryRepo(ABC):
    """Last Event Query Repository Interface - read side, one lookup per group"""

    @abstractmethod
    async def get_last_event(self, *, group_id: str) -> Optional[EventEntity]:
        """Get the most recent event of a group, or None if it never had one."""
        pass
