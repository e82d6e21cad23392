"""Repository implementations (in-memory)."""

from workforce.infrastructure.persistence.repositories.activity_repo import (
    InMemoryTaskActivityRepository,
)
from workforce.infrastructure.persistence.repositories.task_repo import (
    InMemoryTaskRepository,
)

__all__ = ["InMemoryTaskActivityRepository", "InMemoryTaskRepository"]
