from datetime import datetime, timedelta, timezone
import math

import attrs

from src.platform.exception.exceptions import DomainError


def _validate_timezone_aware(instance: object, attribute: attrs.Attribute, value: datetime) -> None:
    if not isinstance(value, datetime):
        raise DomainError(f'Event {attribute.name} must be a datetime')
    if value.tzinfo is None or value.utcoffset() is None:
        raise DomainError(f'Event {attribute.name} must be timezone aware')


def _validate_hours(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise DomainError(f'Event {attribute.name} must be a number')
    if not math.isfinite(value):
        raise DomainError(f'Event {attribute.name} must be finite')
    if value < 0:
        raise DomainError(f'Event {attribute.name} cannot be negative')


@attrs.frozen
class EventEntity:
    end_date: datetime = attrs.field(validator=_validate_timezone_aware)
    review_time_in_hours: float = attrs.field(default=0, validator=_validate_hours)

    @property
    def review_end_date(self) -> datetime:
        try:
            return self.end_date + timedelta(hours=self.review_time_in_hours)
        except OverflowError:
            # Past datetime.max: the review window never ends
            return datetime.max.replace(tzinfo=timezone.utc)
