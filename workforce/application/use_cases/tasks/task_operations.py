"""Task operations: create, update, reassign by reference, priority, and task queries."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, TypeVar

from workforce.application.dtos.task import TaskCreate, TaskResult, TaskUpdate
from workforce.application.services.task_transition_validator import (
    TaskTransitionValidator,
)
from workforce.core.config import Settings, get_settings
from workforce.core.reference_locks import ReferenceLockRegistry
from workforce.domain.entities import TaskActivityEntity, TaskEntity
from workforce.domain.enums import ActivityAction, Priority, ReferenceType, TaskStatus
from workforce.domain.exceptions import TaskNotFoundException, ValidationException
from workforce.domain.value_objects import (
    DateWindow,
    Reference,
    coerce_enum,
    validate_positive_id,
)
from workforce.shared.telemetry.logging import get_logger
from workforce.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)
from workforce.shared.utils.datetime import ensure_utc, from_timestamp_ms_utc, utc_now

if TYPE_CHECKING:
    from workforce.application.interfaces.repositories import (
        ITaskActivityRepository,
        ITaskRepository,
    )

logger = get_logger(__name__)

T = TypeVar("T")


def _validated(field: str, check: Callable[..., T], *args: Any) -> T:
    """Run a domain check and re-raise its ValueError as ValidationException."""
    try:
        return check(*args)
    except ValueError as e:
        raise ValidationException(str(e), field=field) from e


def _positive_id(value: object, field: str) -> int:
    return _validated(field, validate_positive_id, value, field)


def _assignee_ids(assignee_ids: list[int] | None) -> list[int]:
    if assignee_ids is None:
        raise ValidationException("assignee_ids is required", field="assignee_ids")
    return [_positive_id(a, "assignee_ids") for a in assignee_ids]


def _moment(value: datetime | int | None, field: str) -> datetime:
    """Accept an aware/naive datetime or epoch milliseconds; return UTC datetime."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return from_timestamp_ms_utc(value)
        except (OverflowError, OSError, ValueError) as e:
            raise ValidationException(
                f"{field} is out of range for epoch milliseconds: {value}", field=field
            ) from e
    raise ValidationException(
        f"{field} must be a datetime or epoch milliseconds, got {value!r}", field=field
    )


def _reference(reference_id: int, reference_type: ReferenceType | str | None) -> Reference:
    ref_type = _validated(
        "reference_type", coerce_enum, ReferenceType, reference_type, "reference_type"
    )
    ref_id = _positive_id(reference_id, "reference_id")
    return Reference(ref_id, ref_type)


class TaskService:
    """Task lifecycle engine.

    Holds the reassignment rule (retire active tasks on a reference before
    creating the new assignment) and the daily view rule (carry overdue open
    work forward). Reassignments are serialized per reference key.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        activity_repo: ITaskActivityRepository | None = None,
        settings: Settings | None = None,
        locks: ReferenceLockRegistry | None = None,
    ) -> None:
        self.task_repo = task_repo
        self.activity_repo = activity_repo
        self.settings = settings or get_settings()
        self.locks = locks if locks is not None else ReferenceLockRegistry()
        self.transition_validator = TaskTransitionValidator(
            enforce=self.settings.enforce_status_transitions
        )

    async def _require(self, task_id: int) -> TaskEntity:
        task = await self.task_repo.get_by_id(_positive_id(task_id, "task_id"))
        if task is None:
            raise TaskNotFoundException(task_id)
        return task

    async def _record(
        self, task_id: int | None, action: ActivityAction, details: str
    ) -> None:
        if self.activity_repo is None or task_id is None:
            return
        await self.activity_repo.append_activity(
            TaskActivityEntity(task_id=task_id, action=action, details=details)
        )

    # ---- creation ----

    def _build_task(self, item: TaskCreate) -> TaskEntity:
        reference = _reference(item.reference_id, item.reference_type)
        priority = (
            _validated("priority", coerce_enum, Priority, item.priority, "priority")
            if item.priority is not None
            else self.settings.default_priority
        )
        return TaskEntity(
            reference_id=reference.reference_id,
            reference_type=reference.reference_type,
            assignee_id=_positive_id(item.assignee_id, "assignee_id"),
            status=TaskStatus.ASSIGNED,
            priority=priority,
            deadline=_moment(item.deadline, "deadline"),
            description=item.description or self.settings.created_task_description,
            task_type=item.task_type,
        )

    @traced("task.create_tasks")
    async def create_tasks(self, items: list[TaskCreate]) -> list[TaskResult]:
        """Create tasks directly. All items are validated before any is saved."""
        logger.info("Creating %d tasks", len(items))
        entities = [self._build_task(item) for item in items]
        created: list[TaskResult] = []
        for entity in entities:
            saved = await self.task_repo.save(entity)
            await self._record(
                saved.id,
                ActivityAction.TASK_CREATED,
                f"Task created for {saved.reference} and assigned to {saved.assignee_id}",
            )
            logger.debug("Created task with ID: %s", saved.id)
            created.append(TaskResult.from_entity(saved))
        return created

    # ---- updates ----

    def _parse_status(self, status: TaskStatus | str | None) -> TaskStatus | None:
        if status is None:
            return None
        return _validated("status", coerce_enum, TaskStatus, status, "status")

    async def _apply_update(
        self, task: TaskEntity, status: TaskStatus | None, description: str | None
    ) -> TaskEntity:
        changes: list[tuple[ActivityAction, str]] = []
        if status is not None and status != task.status:
            self.transition_validator.validate(task.id, task.status, status)
            changes.append(
                (
                    ActivityAction.STATUS_CHANGED,
                    f"Status changed from {task.status.value} to {status.value}",
                )
            )
            task.status = status
        if description is not None and description != task.description:
            changes.append((ActivityAction.DESCRIPTION_CHANGED, "Description updated"))
            task.description = description
        if not changes:
            return task
        saved = await self.task_repo.save(task)
        for action, details in changes:
            await self._record(saved.id, action, details)
        logger.debug("Updated task with ID: %s", saved.id)
        return saved

    @traced("task.update_task")
    async def update_task(
        self,
        task_id: int,
        *,
        status: TaskStatus | str | None = None,
        description: str | None = None,
    ) -> TaskResult:
        """Apply only the fields given; raise TaskNotFoundException for an unknown id."""
        logger.info("Updating task ID: %s", task_id)
        parsed = self._parse_status(status)
        task = await self._require(task_id)
        return TaskResult.from_entity(await self._apply_update(task, parsed, description))

    @traced("task.update_tasks")
    async def update_tasks(self, items: list[TaskUpdate]) -> list[TaskResult]:
        """Update several tasks; ids, statuses and transitions are checked before any write."""
        logger.info("Updating %d tasks", len(items))
        parsed = [(item, self._parse_status(item.status)) for item in items]
        current: dict[int, TaskStatus] = {}
        for item, status in parsed:
            if item.task_id not in current:
                current[item.task_id] = (await self._require(item.task_id)).status
            if status is not None and status != current[item.task_id]:
                self.transition_validator.validate(item.task_id, current[item.task_id], status)
                current[item.task_id] = status

        updated: list[TaskResult] = []
        for item, status in parsed:
            task = await self._require(item.task_id)
            saved = await self._apply_update(task, status, item.description)
            updated.append(TaskResult.from_entity(saved))
        return updated

    @traced("task.update_task_priority")
    async def update_task_priority(
        self, task_id: int, priority: Priority | str
    ) -> TaskResult:
        """Replace the task's priority; every other field is left untouched."""
        new_priority = _validated("priority", coerce_enum, Priority, priority, "priority")
        logger.info("Updating priority for task ID: %s to %s", task_id, new_priority.value)
        task = await self._require(task_id)
        if task.priority == new_priority:
            return TaskResult.from_entity(task)
        old_priority = task.priority
        task.priority = new_priority
        saved = await self.task_repo.save(task)
        await self._record(
            saved.id,
            ActivityAction.PRIORITY_CHANGED,
            f"Priority changed from {old_priority.value if old_priority else None} "
            f"to {new_priority.value}",
        )
        logger.info(
            "Priority changed from %s to %s for task ID: %s",
            old_priority.value if old_priority else None,
            new_priority.value,
            saved.id,
        )
        return TaskResult.from_entity(saved)

    # ---- reassignment ----

    async def _restore(self, originals: list[TaskEntity]) -> None:
        """Write back pre-reassignment copies of tasks that were already cancelled."""
        for original in originals:
            try:
                await self.task_repo.save(original)
            except Exception:
                logger.exception(
                    "Failed to restore task ID: %s after reassignment failure", original.id
                )
        add_span_event("reassignment.rolled_back", {"restored_count": len(originals)})

    @traced("task.assign_by_reference")
    async def assign_by_reference(
        self,
        reference_id: int,
        reference_type: ReferenceType | str,
        assignee_id: int,
    ) -> str:
        """Retire every active task on the reference, then assign a new one.

        Runs under the reference's lock. If the store fails part way, tasks
        already cancelled are restored before the error propagates, so either
        all cancellations and the creation happen or none is kept.

        Returns:
            Summary with the new task id, the assignee and the cancelled count.
        """
        reference = _reference(reference_id, reference_type)
        assignee = _positive_id(assignee_id, "assignee_id")
        logger.info(
            "Assigning tasks by reference - Reference ID: %s, Type: %s, Assignee: %s",
            reference.reference_id,
            reference.reference_type.value,
            assignee,
        )

        async with self.locks.hold(reference.key):
            existing = await self.task_repo.find_by_reference(
                reference.reference_id, reference.reference_type
            )
            to_cancel = [t for t in existing if t.is_active()]
            originals = [replace(t) for t in to_cancel]
            cancelled: list[TaskEntity] = []
            try:
                for task in to_cancel:
                    task.status = TaskStatus.CANCELLED
                    cancelled.append(await self.task_repo.save(task))
                    logger.debug("Cancelled existing task with ID: %s", task.id)
                new_task = await self.task_repo.save(
                    TaskEntity(
                        reference_id=reference.reference_id,
                        reference_type=reference.reference_type,
                        assignee_id=assignee,
                        status=TaskStatus.ASSIGNED,
                        priority=self.settings.default_priority,
                        deadline=utc_now()
                        + timedelta(hours=self.settings.reassignment_deadline_hours),
                        description=self.settings.reassignment_description,
                    )
                )
            except BaseException:
                # Shielded so a cancelled caller still gets its tasks restored.
                await asyncio.shield(self._restore(originals[: len(cancelled)]))
                raise

        for task in cancelled:
            await self._record(
                task.id,
                ActivityAction.TASK_CANCELLED,
                f"Cancelled by reassignment of {reference} to {assignee}",
            )
        await self._record(
            new_task.id,
            ActivityAction.TASK_ASSIGNED,
            f"Assigned to {assignee} by reference {reference}",
        )
        add_span_attributes(cancelled_count=len(cancelled), new_task_id=new_task.id)

        message = (
            f"Successfully assigned task (ID: {new_task.id}) to assignee {assignee}. "
            f"Cancelled {len(cancelled)} existing tasks."
        )
        logger.info(message)
        return message

    # ---- queries ----

    @traced("task.get_task")
    async def get_task(self, task_id: int) -> TaskResult:
        """Return the task; raise TaskNotFoundException for an unknown id."""
        logger.info("Fetching task by ID: %s", task_id)
        return TaskResult.from_entity(await self._require(task_id))

    @traced("task.fetch_tasks_by_date")
    async def fetch_tasks_by_date(
        self,
        assignee_ids: list[int],
        start: datetime | int,
        end: datetime | int,
    ) -> list[TaskResult]:
        """Smart daily view for the assignees over [start, end].

        Includes non-cancelled tasks due inside the window and tasks due
        before it that are still ASSIGNED or STARTED.
        """
        ids = _assignee_ids(assignee_ids)
        window = _validated(
            "end", DateWindow, _moment(start, "start"), _moment(end, "end")
        )
        logger.info(
            "Fetching tasks by date range - Start: %s, End: %s, Assignees: %s",
            window.start.isoformat(),
            window.end.isoformat(),
            ids,
        )
        if not ids:
            return []
        tasks = await self.task_repo.find_by_assignees(ids)
        visible = [TaskResult.from_entity(t) for t in tasks if t.is_visible_in(window)]
        logger.info("Found %d tasks matching criteria", len(visible))
        return visible

    @traced("task.fetch_tasks_by_assignees")
    async def fetch_tasks_by_assignees(self, assignee_ids: list[int]) -> list[TaskResult]:
        """Return all non-cancelled tasks for the assignees."""
        ids = _assignee_ids(assignee_ids)
        logger.info("Fetching tasks by assignee IDs: %s", ids)
        if not ids:
            return []
        tasks = await self.task_repo.find_by_assignees(ids)
        found = [
            TaskResult.from_entity(t) for t in tasks if t.status is not TaskStatus.CANCELLED
        ]
        logger.info("Found %d active tasks for assignees", len(found))
        return found

    @traced("task.get_tasks_by_priority")
    async def get_tasks_by_priority(self, priority: Priority | str) -> list[TaskResult]:
        """Return all non-cancelled tasks at the given priority."""
        wanted = _validated("priority", coerce_enum, Priority, priority, "priority")
        logger.info("Fetching tasks by priority: %s", wanted.value)
        tasks = await self.task_repo.find_all()
        found = [
            TaskResult.from_entity(t)
            for t in tasks
            if t.priority == wanted and t.status is not TaskStatus.CANCELLED
        ]
        logger.info("Found %d tasks with priority %s", len(found), wanted.value)
        return found
