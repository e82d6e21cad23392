"""Tests for the smart daily view (fetch_tasks_by_date) and the assignee/priority lookups."""

from datetime import UTC, datetime, timedelta

import pytest

from workforce.domain.enums import Priority, TaskStatus
from workforce.domain.exceptions import ValidationException
from workforce.shared.utils.datetime import to_timestamp_ms

JAN_9 = datetime(2025, 1, 9, 12, 0, tzinfo=UTC)
JAN_10 = datetime(2025, 1, 10, tzinfo=UTC)
JAN_11 = datetime(2025, 1, 11, 12, 0, tzinfo=UTC)
JAN_12 = datetime(2025, 1, 12, tzinfo=UTC)
JAN_13 = datetime(2025, 1, 13, 12, 0, tzinfo=UTC)


async def test_daily_view_scenario(service, make_task) -> None:
    """Overdue STARTED and in-window ASSIGNED show; overdue COMPLETED and CANCELLED do not."""
    a = await make_task(assignee_id=7, deadline=JAN_9, status=TaskStatus.STARTED)
    await make_task(assignee_id=7, deadline=JAN_9, status=TaskStatus.COMPLETED)
    await make_task(assignee_id=7, deadline=JAN_11, status=TaskStatus.CANCELLED)
    d = await make_task(assignee_id=7, deadline=JAN_11, status=TaskStatus.ASSIGNED)

    result = await service.fetch_tasks_by_date([7], JAN_10, JAN_12)

    assert [t.id for t in result] == [a.id, d.id]


@pytest.mark.parametrize("status", list(TaskStatus))
async def test_cancelled_never_returned(service, make_task, status) -> None:
    """P3: no window returns a CANCELLED task, whatever its deadline."""
    for deadline in (JAN_9, JAN_11, JAN_13):
        await make_task(deadline=deadline, status=TaskStatus.CANCELLED)
    await make_task(deadline=JAN_11, status=status)

    result = await service.fetch_tasks_by_date([7], JAN_10, JAN_12)

    assert all(t.status is not TaskStatus.CANCELLED for t in result)
    assert len(result) == (0 if status is TaskStatus.CANCELLED else 1)


async def test_overdue_by_one_tick(service, make_task) -> None:
    """P4: deadline = start - 1ms is carried forward when ASSIGNED, dropped when COMPLETED."""
    just_before = JAN_10 - timedelta(milliseconds=1)
    open_task = await make_task(deadline=just_before, status=TaskStatus.ASSIGNED)
    await make_task(deadline=just_before, status=TaskStatus.COMPLETED)

    result = await service.fetch_tasks_by_date([7], JAN_10, JAN_12)

    assert [t.id for t in result] == [open_task.id]


@pytest.mark.parametrize(
    "status", [TaskStatus.ASSIGNED, TaskStatus.STARTED, TaskStatus.COMPLETED]
)
async def test_in_window_included_regardless_of_status(service, make_task, status) -> None:
    """P5: tasks due inside the window show for every non-cancelled status."""
    task = await make_task(deadline=JAN_11, status=status)

    result = await service.fetch_tasks_by_date([7], JAN_10, JAN_12)

    assert [t.id for t in result] == [task.id]


async def test_window_bounds_are_inclusive(service, make_task) -> None:
    at_start = await make_task(deadline=JAN_10, status=TaskStatus.COMPLETED)
    at_end = await make_task(deadline=JAN_12, status=TaskStatus.COMPLETED)

    result = await service.fetch_tasks_by_date([7], JAN_10, JAN_12)

    assert {t.id for t in result} == {at_start.id, at_end.id}


async def test_after_window_excluded_even_if_open(service, make_task) -> None:
    await make_task(deadline=JAN_13, status=TaskStatus.ASSIGNED)

    assert await service.fetch_tasks_by_date([7], JAN_10, JAN_12) == []


async def test_only_requested_assignees(service, make_task) -> None:
    mine = await make_task(assignee_id=7, deadline=JAN_11)
    await make_task(assignee_id=8, deadline=JAN_11)
    theirs = await make_task(assignee_id=9, deadline=JAN_11)

    result = await service.fetch_tasks_by_date([7, 9], JAN_10, JAN_12)

    assert {t.id for t in result} == {mine.id, theirs.id}


async def test_accepts_epoch_milliseconds(service, make_task) -> None:
    task = await make_task(deadline=JAN_11)

    result = await service.fetch_tasks_by_date(
        [7], to_timestamp_ms(JAN_10), to_timestamp_ms(JAN_12)
    )

    assert [t.id for t in result] == [task.id]


async def test_naive_window_is_treated_as_utc(service, make_task) -> None:
    task = await make_task(deadline=JAN_11)

    result = await service.fetch_tasks_by_date(
        [7], datetime(2025, 1, 10), datetime(2025, 1, 12)
    )

    assert [t.id for t in result] == [task.id]


async def test_end_before_start_rejected(service) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.fetch_tasks_by_date([7], JAN_12, JAN_10)
    assert exc_info.value.details["field"] == "end"


@pytest.mark.parametrize("ids", [None, [0], [7, -1]])
async def test_bad_assignee_ids_rejected(service, ids) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.fetch_tasks_by_date(ids, JAN_10, JAN_12)
    assert exc_info.value.details["field"] == "assignee_ids"


async def test_missing_bound_rejected(service) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.fetch_tasks_by_date([7], None, JAN_12)
    assert exc_info.value.details["field"] == "start"


async def test_empty_assignees_returns_nothing(service, make_task) -> None:
    await make_task(deadline=JAN_11)

    assert await service.fetch_tasks_by_date([], JAN_10, JAN_12) == []


class TestAssigneeAndPriorityLookups:
    """fetch_tasks_by_assignees and get_tasks_by_priority skip cancelled tasks."""

    async def test_by_assignees_excludes_cancelled(self, service, make_task) -> None:
        open_task = await make_task(assignee_id=3, status=TaskStatus.STARTED)
        done = await make_task(assignee_id=3, status=TaskStatus.COMPLETED)
        await make_task(assignee_id=3, status=TaskStatus.CANCELLED)
        await make_task(assignee_id=4)

        result = await service.fetch_tasks_by_assignees([3])

        assert [t.id for t in result] == [open_task.id, done.id]

    async def test_by_priority_excludes_cancelled_and_other_levels(self, service, make_task) -> None:
        high = await make_task(priority=Priority.HIGH)
        await make_task(priority=Priority.HIGH, status=TaskStatus.CANCELLED)
        await make_task(priority=Priority.LOW)

        result = await service.get_tasks_by_priority(Priority.HIGH)

        assert [t.id for t in result] == [high.id]

    async def test_by_priority_accepts_name(self, service, make_task) -> None:
        low = await make_task(priority=Priority.LOW)

        assert [t.id for t in await service.get_tasks_by_priority("low")] == [low.id]

    async def test_unknown_priority_rejected(self, service) -> None:
        with pytest.raises(ValidationException):
            await service.get_tasks_by_priority("URGENT")


@pytest.mark.parametrize(
    ("start", "end", "field"),
    [(0, 10**20, "end"), (-(10**20), 0, "start")],
)
async def test_out_of_range_epoch_ms_rejected(service, start, end, field) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.fetch_tasks_by_date([7], start, end)
    assert exc_info.value.details["field"] == field
