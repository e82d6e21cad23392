"""Task use cases: lifecycle operations, queries, comments and history."""

from workforce.application.use_cases.tasks.task_history import TaskHistoryService
from workforce.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskHistoryService", "TaskService"]
