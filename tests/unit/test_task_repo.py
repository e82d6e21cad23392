"""Tests for the in-memory task and activity stores."""

from datetime import UTC, datetime

import pytest

from workforce.domain.entities import TaskActivityEntity, TaskCommentEntity, TaskEntity
from workforce.domain.enums import ActivityAction, ReferenceType, TaskStatus
from workforce.infrastructure.exceptions import StoreException
from workforce.infrastructure.persistence.repositories import (
    InMemoryTaskActivityRepository,
    InMemoryTaskRepository,
)

DEADLINE = datetime(2025, 1, 10, tzinfo=UTC)


def _task(**overrides) -> TaskEntity:
    fields = {
        "reference_id": 1,
        "reference_type": ReferenceType.ORDER,
        "assignee_id": 7,
        "status": TaskStatus.ASSIGNED,
        "deadline": DEADLINE,
    }
    fields.update(overrides)
    return TaskEntity(**fields)


class TestInMemoryTaskRepository:
    async def test_save_assigns_increasing_ids(self) -> None:
        repo = InMemoryTaskRepository()
        a = await repo.save(_task())
        b = await repo.save(_task())
        assert (a.id, b.id) == (1, 2)
        assert len(repo) == 2

    async def test_seeded_tasks_get_ids(self) -> None:
        repo = InMemoryTaskRepository([_task(), _task(assignee_id=8)])
        assert [t.assignee_id for t in await repo.find_all()] == [7, 8]
        assert (await repo.get_by_id(2)).assignee_id == 8

    async def test_input_entity_is_not_mutated(self) -> None:
        repo = InMemoryTaskRepository()
        task = _task()
        await repo.save(task)
        assert task.id is None

    async def test_reads_return_copies(self) -> None:
        """Changing a returned entity does not change the stored record."""
        repo = InMemoryTaskRepository()
        saved = await repo.save(_task())
        saved.status = TaskStatus.CANCELLED
        fetched = await repo.get_by_id(saved.id)
        assert fetched.status is TaskStatus.ASSIGNED
        fetched.status = TaskStatus.COMPLETED
        assert (await repo.get_by_id(saved.id)).status is TaskStatus.ASSIGNED

    async def test_save_existing_replaces(self) -> None:
        repo = InMemoryTaskRepository()
        saved = await repo.save(_task())
        saved.status = TaskStatus.STARTED
        await repo.save(saved)
        assert (await repo.get_by_id(saved.id)).status is TaskStatus.STARTED
        assert len(repo) == 1

    async def test_save_unknown_id_raises(self) -> None:
        repo = InMemoryTaskRepository()
        with pytest.raises(StoreException, match="unknown task id 9"):
            await repo.save(_task(id=9))

    async def test_get_unknown_returns_none(self) -> None:
        assert await InMemoryTaskRepository().get_by_id(1) is None

    async def test_find_by_reference_matches_id_and_type(self) -> None:
        repo = InMemoryTaskRepository(
            [
                _task(),
                _task(status=TaskStatus.CANCELLED),
                _task(reference_type=ReferenceType.PRODUCT),
                _task(reference_id=2),
            ]
        )
        found = await repo.find_by_reference(1, ReferenceType.ORDER)
        assert [t.id for t in found] == [1, 2]

    async def test_find_by_assignees(self) -> None:
        repo = InMemoryTaskRepository([_task(assignee_id=1), _task(assignee_id=2), _task(assignee_id=3)])
        found = await repo.find_by_assignees([3, 1])
        assert [t.assignee_id for t in found] == [1, 3]
        assert await repo.find_by_assignees([]) == []


class TestInMemoryTaskActivityRepository:
    async def test_activity_appended_in_order(self) -> None:
        repo = InMemoryTaskActivityRepository()
        await repo.append_activity(TaskActivityEntity(1, ActivityAction.TASK_CREATED, "created"))
        await repo.append_activity(TaskActivityEntity(2, ActivityAction.TASK_CREATED, "created"))
        await repo.append_activity(TaskActivityEntity(1, ActivityAction.STATUS_CHANGED, "started"))

        entries = await repo.list_activity(1)

        assert [e.action for e in entries] == [
            ActivityAction.TASK_CREATED,
            ActivityAction.STATUS_CHANGED,
        ]
        assert [e.id for e in entries] == [1, 3]

    async def test_comments_per_task(self) -> None:
        repo = InMemoryTaskActivityRepository()
        stored = await repo.append_comment(TaskCommentEntity(4, "hello", author_id=2))

        assert stored.id == 1
        assert [c.comment for c in await repo.list_comments(4)] == ["hello"]
        assert await repo.list_comments(5) == []
        assert await repo.list_activity(5) == []
