"""DTOs for task use cases (no dependency on persistence or presentation)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from workforce.domain.entities import TaskActivityEntity, TaskCommentEntity, TaskEntity
from workforce.domain.enums import ActivityAction, Priority, ReferenceType, TaskStatus


@dataclass(frozen=True)
class TaskCreate:
    """Input for creating a task directly. Service validates; repo persists."""

    reference_id: int
    reference_type: ReferenceType | str
    assignee_id: int
    deadline: datetime
    priority: Priority | str | None = None
    task_type: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class TaskUpdate:
    """Partial update of one task. None fields are left unchanged."""

    task_id: int
    status: TaskStatus | str | None = None
    description: str | None = None


@dataclass(frozen=True)
class TaskResult:
    """Task read-model returned by every task operation."""

    id: int
    reference_id: int
    reference_type: ReferenceType
    assignee_id: int
    status: TaskStatus
    priority: Priority | None
    deadline: datetime
    description: str | None
    task_type: str | None
    created_at: datetime

    @classmethod
    def from_entity(cls, task: TaskEntity) -> TaskResult:
        """Map a stored TaskEntity to its read-model."""
        if task.id is None:
            raise ValueError("Cannot build TaskResult from an unsaved task")
        return cls(
            id=task.id,
            reference_id=task.reference_id,
            reference_type=task.reference_type,
            assignee_id=task.assignee_id,
            status=task.status,
            priority=task.priority,
            deadline=task.deadline,
            description=task.description,
            task_type=task.task_type,
            created_at=task.created_at,
        )


@dataclass(frozen=True)
class ActivityResult:
    """One activity history entry."""

    id: int
    task_id: int
    action: ActivityAction
    details: str
    actor_id: int | None
    occurred_at: datetime

    @classmethod
    def from_entity(cls, activity: TaskActivityEntity) -> ActivityResult:
        return cls(
            id=activity.id or 0,
            task_id=activity.task_id,
            action=activity.action,
            details=activity.details,
            actor_id=activity.actor_id,
            occurred_at=activity.occurred_at,
        )


@dataclass(frozen=True)
class CommentResult:
    """One comment on a task."""

    id: int
    task_id: int
    comment: str
    author_id: int | None
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: TaskCommentEntity) -> CommentResult:
        return cls(
            id=comment.id or 0,
            task_id=comment.task_id,
            comment=comment.comment,
            author_id=comment.author_id,
            created_at=comment.created_at,
        )


@dataclass(frozen=True)
class TaskHistoryResult:
    """Task with its activity history and comments (oldest first)."""

    task: TaskResult
    activity_history: list[ActivityResult] = field(default_factory=list)
    comments: list[CommentResult] = field(default_factory=list)
