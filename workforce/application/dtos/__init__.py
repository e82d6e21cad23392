"""Application DTOs (inputs and read-models for use cases)."""

from workforce.application.dtos.task import (
    ActivityResult,
    CommentResult,
    TaskCreate,
    TaskHistoryResult,
    TaskResult,
    TaskUpdate,
)

__all__ = [
    "ActivityResult",
    "CommentResult",
    "TaskCreate",
    "TaskHistoryResult",
    "TaskResult",
    "TaskUpdate",
]
