"""Validates task status transitions against the lifecycle state machine."""

from __future__ import annotations

from workforce.domain.enums import TaskStatus
from workforce.domain.exceptions import TransitionValidationException

# Terminal states have no outgoing transitions.
ALLOWED_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.ASSIGNED: frozenset(
        {TaskStatus.STARTED, TaskStatus.COMPLETED, TaskStatus.CANCELLED}
    ),
    TaskStatus.STARTED: frozenset(
        {TaskStatus.ASSIGNED, TaskStatus.COMPLETED, TaskStatus.CANCELLED}
    ),
    TaskStatus.COMPLETED: frozenset(),
    TaskStatus.CANCELLED: frozenset(),
}


def can_transition(current: TaskStatus, target: TaskStatus) -> bool:
    """Return whether current -> target is legal. Staying in place always is."""
    return current == target or target in ALLOWED_TRANSITIONS[current]


class TaskTransitionValidator:
    """Checks explicit status updates against ALLOWED_TRANSITIONS.

    When enforce is False every move is accepted (open setter); the table is
    still available through can_transition for callers that want to check.
    """

    def __init__(self, enforce: bool = False) -> None:
        self.enforce = enforce

    def validate(self, task_id: int | None, current: TaskStatus, target: TaskStatus) -> None:
        """Raise TransitionValidationException if enforcing and the move is illegal."""
        if not self.enforce:
            return
        if not can_transition(current, target):
            raise TransitionValidationException(task_id, current.value, target.value)
