"""Application services (domain rules that need no repository)."""

from workforce.application.services.task_transition_validator import (
    ALLOWED_TRANSITIONS,
    TaskTransitionValidator,
    can_transition,
)

__all__ = ["ALLOWED_TRANSITIONS", "TaskTransitionValidator", "can_transition"]
