"""In-memory task repository. Implements ITaskRepository."""

from __future__ import annotations

import itertools
import logging
from dataclasses import replace

from workforce.domain.entities import TaskEntity
from workforce.domain.enums import ReferenceType
from workforce.infrastructure.exceptions import StoreException

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """Task store backed by a dict keyed by id.

    Ids come from a monotonically increasing counter and are never reused.
    Every read and write copies the entity, so the stored record only
    changes through save(). Iteration follows insertion order.
    """

    def __init__(self, tasks: list[TaskEntity] | None = None) -> None:
        self._tasks: dict[int, TaskEntity] = {}
        self._ids = itertools.count(1)
        for task in tasks or []:
            self._insert(task)

    def _insert(self, task: TaskEntity) -> TaskEntity:
        stored = replace(task, id=next(self._ids))
        self._tasks[stored.id] = stored
        return replace(stored)

    async def get_by_id(self, task_id: int) -> TaskEntity | None:
        """Return a copy of the task, or None when unknown."""
        task = self._tasks.get(task_id)
        return replace(task) if task else None

    async def find_by_reference(
        self, reference_id: int, reference_type: ReferenceType
    ) -> list[TaskEntity]:
        """Return copies of every task for the reference, any status."""
        return [
            replace(t)
            for t in self._tasks.values()
            if t.reference_id == reference_id and t.reference_type == reference_type
        ]

    async def find_by_assignees(self, assignee_ids: list[int]) -> list[TaskEntity]:
        """Return copies of every task assigned to one of assignee_ids."""
        wanted = set(assignee_ids)
        return [replace(t) for t in self._tasks.values() if t.assignee_id in wanted]

    async def find_all(self) -> list[TaskEntity]:
        """Return copies of all tasks."""
        return [replace(t) for t in self._tasks.values()]

    async def save(self, task: TaskEntity) -> TaskEntity:
        """Insert when task.id is None, otherwise replace the stored record.

        Raises:
            StoreException: If task.id is set but no such task is stored.
        """
        if task.id is None:
            saved = self._insert(task)
            logger.debug("Inserted task id=%s", saved.id)
            return saved
        if task.id not in self._tasks:
            raise StoreException("save", f"unknown task id {task.id}")
        self._tasks[task.id] = replace(task)
        return replace(task)

    def __len__(self) -> int:
        return len(self._tasks)
