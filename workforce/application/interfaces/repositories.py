"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
The store offers atomic single-record writes only; it has no multi-record
transactions, so callers that fan out writes must coordinate themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from workforce.domain.entities import (
        TaskActivityEntity,
        TaskCommentEntity,
        TaskEntity,
    )
    from workforce.domain.enums import ReferenceType


class ITaskRepository(Protocol):
    """Protocol for the task store (DIP).

    Implementations return copies: mutating a returned entity has no effect
    until it is passed back to save().
    """

    async def get_by_id(self, task_id: int) -> TaskEntity | None:
        """Return task by ID, or None when unknown."""

    async def find_by_reference(
        self, reference_id: int, reference_type: ReferenceType
    ) -> list[TaskEntity]:
        """Return every task (any status) for the reference."""

    async def find_by_assignees(self, assignee_ids: list[int]) -> list[TaskEntity]:
        """Return every task (any status) assigned to one of assignee_ids."""

    async def find_all(self) -> list[TaskEntity]:
        """Return all tasks in the store's natural order."""

    async def save(self, task: TaskEntity) -> TaskEntity:
        """Insert (id is None) or update a task; return the stored copy with its id."""


class ITaskActivityRepository(Protocol):
    """Protocol for append-only task activity and comment records (DIP)."""

    async def append_activity(self, activity: TaskActivityEntity) -> TaskActivityEntity:
        """Append an activity record; return it with its id."""

    async def list_activity(self, task_id: int) -> list[TaskActivityEntity]:
        """Return activity for task in chronological order (oldest first)."""

    async def append_comment(self, comment: TaskCommentEntity) -> TaskCommentEntity:
        """Append a comment; return it with its id."""

    async def list_comments(self, task_id: int) -> list[TaskCommentEntity]:
        """Return comments for task in chronological order (oldest first)."""
