"""Task comments and activity history (append-only records owned by a task)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from workforce.application.dtos.task import (
    ActivityResult,
    CommentResult,
    TaskHistoryResult,
    TaskResult,
)
from workforce.domain.entities import TaskActivityEntity, TaskCommentEntity, TaskEntity
from workforce.domain.enums import ActivityAction
from workforce.domain.exceptions import TaskNotFoundException, ValidationException
from workforce.domain.value_objects import validate_positive_id
from workforce.shared.telemetry.logging import get_logger
from workforce.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from workforce.application.interfaces.repositories import (
        ITaskActivityRepository,
        ITaskRepository,
    )

logger = get_logger(__name__)

MAX_COMMENT_LENGTH = 2000


class TaskHistoryService:
    """Add comments to tasks and read a task's history."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        activity_repo: ITaskActivityRepository,
    ) -> None:
        self.task_repo = task_repo
        self.activity_repo = activity_repo

    async def _require(self, task_id: int) -> TaskEntity:
        try:
            validate_positive_id(task_id, "task_id")
        except ValueError as e:
            raise ValidationException(str(e), field="task_id") from e
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    @traced("task.add_comment")
    async def add_comment(
        self, task_id: int, comment: str, author_id: int | None = None
    ) -> CommentResult:
        """Append a comment to the task and note it in the activity history."""
        logger.info("Adding comment to task ID: %s", task_id)
        text = (comment or "").strip()
        if not text:
            raise ValidationException("comment must not be empty", field="comment")
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationException(
                f"comment must not exceed {MAX_COMMENT_LENGTH} characters", field="comment"
            )
        if author_id is not None:
            try:
                validate_positive_id(author_id, "author_id")
            except ValueError as e:
                raise ValidationException(str(e), field="author_id") from e
        await self._require(task_id)

        stored = await self.activity_repo.append_comment(
            TaskCommentEntity(task_id=task_id, comment=text, author_id=author_id)
        )
        await self.activity_repo.append_activity(
            TaskActivityEntity(
                task_id=task_id,
                action=ActivityAction.COMMENT_ADDED,
                details="Comment added",
                actor_id=author_id,
            )
        )
        logger.debug("Comment %s added to task %s", stored.id, task_id)
        return CommentResult.from_entity(stored)

    @traced("task.get_task_history")
    async def get_task_history(self, task_id: int) -> TaskHistoryResult:
        """Return the task with its activity history and comments, oldest first."""
        logger.info("Fetching history for task ID: %s", task_id)
        task = await self._require(task_id)
        activity = await self.activity_repo.list_activity(task_id)
        comments = await self.activity_repo.list_comments(task_id)
        return TaskHistoryResult(
            task=TaskResult.from_entity(task),
            activity_history=[ActivityResult.from_entity(a) for a in activity],
            comments=[CommentResult.from_entity(c) for c in comments],
        )
