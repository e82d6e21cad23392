"""Domain entities."""

from workforce.domain.entities.activity import TaskActivityEntity, TaskCommentEntity
from workforce.domain.entities.task import TaskEntity

__all__ = ["TaskActivityEntity", "TaskCommentEntity", "TaskEntity"]
