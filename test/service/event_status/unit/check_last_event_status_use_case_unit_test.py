"""
Unit tests for CheckLastEventStatusUseCase

Test Focus:
1. Repository interaction: exactly one get_last_event call, group id passed through
2. Status boundaries with a one hour review window (both ends inclusive)
3. Fail Fast: repository errors reach the caller untouched
"""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from src.service.event_status.app.interface.i_last_event_query_repo import ILastEventQueryRepo
from src.service.event_status.app.query.check_last_event_status_use_case import (
    CheckLastEventStatusUseCase,
)
from src.service.event_status.domain.entity.event_entity import EventEntity
from src.service.event_status.domain.enum.event_status import EventStatus


GROUP_ID = 'any-group-id'
ONE_MS = timedelta(milliseconds=1)
ONE_HOUR = timedelta(hours=1)


@pytest.mark.unit
class TestCheckLastEventStatus:
    @pytest.fixture
    def mock_last_event_repo(self) -> Mock:
        repo = AsyncMock(spec=ILastEventQueryRepo)
        repo.get_last_event.return_value = None
        return repo

    @pytest.fixture
    def use_case(self, mock_last_event_repo: Mock, now: datetime) -> CheckLastEventStatusUseCase:
        return CheckLastEventStatusUseCase(
            last_event_query_repo=mock_last_event_repo, clock=lambda: now
        )

    @pytest.mark.asyncio
    async def test_get_last_event_with_group_id(
        self, use_case: CheckLastEventStatusUseCase, mock_last_event_repo: Mock
    ) -> None:
        await use_case.execute(group_id=GROUP_ID)

        mock_last_event_repo.get_last_event.assert_awaited_once_with(group_id='any-group-id')

    @pytest.mark.asyncio
    async def test_closed_when_group_has_no_event(
        self, use_case: CheckLastEventStatusUseCase
    ) -> None:
        result = await use_case.execute(group_id=GROUP_ID)

        assert result == EventStatus.CLOSED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'end_date_offset, expected',
        [
            pytest.param(ONE_MS, EventStatus.ACTIVE, id='not_ended'),
            pytest.param(timedelta(0), EventStatus.ACTIVE, id='ends_now'),
            pytest.param(-ONE_MS, EventStatus.IN_REVIEW, id='review_started'),
            pytest.param(-ONE_HOUR + ONE_MS, EventStatus.IN_REVIEW, id='review_almost_over'),
            pytest.param(-ONE_HOUR, EventStatus.IN_REVIEW, id='review_ends_now'),
            pytest.param(-ONE_HOUR - ONE_MS, EventStatus.CLOSED, id='review_over'),
        ],
    )
    async def test_status_around_end_date(
        self,
        use_case: CheckLastEventStatusUseCase,
        mock_last_event_repo: Mock,
        now: datetime,
        end_date_offset: timedelta,
        expected: EventStatus,
    ) -> None:
        """
        Given: last event ends at now + offset, with a one hour review window
        When: status is checked
        Then: ACTIVE up to end_date, IN_REVIEW up to end_date + 1h, CLOSED after
        """
        mock_last_event_repo.get_last_event.return_value = EventEntity(
            end_date=now + end_date_offset, review_time_in_hours=1
        )

        result = await use_case.execute(group_id=GROUP_ID)

        assert result == expected
        assert result.value == expected.value

    @pytest.mark.asyncio
    async def test_closed_right_after_end_without_review_window(
        self, use_case: CheckLastEventStatusUseCase, mock_last_event_repo: Mock, now: datetime
    ) -> None:
        mock_last_event_repo.get_last_event.return_value = EventEntity(
            end_date=now - ONE_MS, review_time_in_hours=0
        )

        assert await use_case.execute(group_id=GROUP_ID) == EventStatus.CLOSED

    @pytest.mark.asyncio
    async def test_repo_error_propagates(
        self, use_case: CheckLastEventStatusUseCase, mock_last_event_repo: Mock
    ) -> None:
        """
        Fail Fast: lookup failure is not turned into a status

        Given: repository raises
        When: status is checked
        Then: the same exception reaches the caller, and the repo was called once
        """
        mock_last_event_repo.get_last_event.side_effect = ConnectionError('lookup failed')

        with pytest.raises(ConnectionError, match='lookup failed'):
            await use_case.execute(group_id=GROUP_ID)

        mock_last_event_repo.get_last_event.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clock_read_after_repo_call(self, mock_last_event_repo: Mock, now: datetime) -> None:
        calls: list[str] = []

        async def get_last_event(*, group_id: str) -> EventEntity:
            calls.append('repo')
            return EventEntity(end_date=now, review_time_in_hours=1)

        def clock() -> datetime:
            calls.append('clock')
            return now

        mock_last_event_repo.get_last_event.side_effect = get_last_event
        use_case = CheckLastEventStatusUseCase(
            last_event_query_repo=mock_last_event_repo, clock=clock
        )

        await use_case.execute(group_id=GROUP_ID)

        assert calls == ['repo', 'clock']

    @pytest.mark.asyncio
    async def test_default_clock_is_utc(self, mock_last_event_repo: Mock) -> None:
        use_case = CheckLastEventStatusUseCase(last_event_query_repo=mock_last_event_repo)

        assert use_case.clock().utcoffset() == timedelta(0)
