"""Pytest configuration and fixtures for workforce.

Services are wired over the in-memory stores with explicit Settings, so
tests do not depend on environment variables or a .env file.
"""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

import pytest

from workforce.application.use_cases.tasks import TaskHistoryService, TaskService
from workforce.core.config import Settings
from workforce.domain.entities import TaskEntity
from workforce.domain.enums import Priority, ReferenceType, TaskStatus
from workforce.infrastructure.persistence.repositories import (
    InMemoryTaskActivityRepository,
    InMemoryTaskRepository,
)

# Fixed reference day for window tests: 2025-01-10 00:00 UTC.
JAN_10 = datetime(2025, 1, 10, tzinfo=UTC)


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def activity_repo() -> InMemoryTaskActivityRepository:
    return InMemoryTaskActivityRepository()


@pytest.fixture
def service(
    task_repo: InMemoryTaskRepository,
    activity_repo: InMemoryTaskActivityRepository,
    settings: Settings,
) -> TaskService:
    """TaskService over empty in-memory stores."""
    return TaskService(task_repo, activity_repo=activity_repo, settings=settings)


@pytest.fixture
def history(
    task_repo: InMemoryTaskRepository,
    activity_repo: InMemoryTaskActivityRepository,
) -> TaskHistoryService:
    return TaskHistoryService(task_repo, activity_repo)


@pytest.fixture
def make_task(task_repo: InMemoryTaskRepository) -> Callable[..., Awaitable[TaskEntity]]:
    """Return an async factory that stores a task and returns the stored copy.

    Defaults: reference ORDER/1, assignee 7, ASSIGNED, MEDIUM, deadline JAN_10.
    """

    async def _make(**overrides) -> TaskEntity:
        fields = {
            "reference_id": 1,
            "reference_type": ReferenceType.ORDER,
            "assignee_id": 7,
            "status": TaskStatus.ASSIGNED,
            "priority": Priority.MEDIUM,
            "deadline": JAN_10,
            "description": "seeded",
        }
        fields.update(overrides)
        return await task_repo.save(TaskEntity(**fields))

    return _make
