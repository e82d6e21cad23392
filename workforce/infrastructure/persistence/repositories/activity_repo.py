"""In-memory append-only store for task activity and comments. Implements ITaskActivityRepository."""

from __future__ import annotations

import itertools
from collections import defaultdict
from dataclasses import replace

from workforce.domain.entities import TaskActivityEntity, TaskCommentEntity


class InMemoryTaskActivityRepository:
    """Activity and comment records per task, kept in append order."""

    def __init__(self) -> None:
        self._activity: dict[int, list[TaskActivityEntity]] = defaultdict(list)
        self._comments: dict[int, list[TaskCommentEntity]] = defaultdict(list)
        self._activity_ids = itertools.count(1)
        self._comment_ids = itertools.count(1)

    async def append_activity(self, activity: TaskActivityEntity) -> TaskActivityEntity:
        stored = replace(activity, id=next(self._activity_ids))
        self._activity[stored.task_id].append(stored)
        return replace(stored)

    async def list_activity(self, task_id: int) -> list[TaskActivityEntity]:
        return [replace(a) for a in self._activity.get(task_id, [])]

    async def append_comment(self, comment: TaskCommentEntity) -> TaskCommentEntity:
        stored = replace(comment, id=next(self._comment_ids))
        self._comments[stored.task_id].append(stored)
        return replace(stored)

    async def list_comments(self, task_id: int) -> list[TaskCommentEntity]:
        return [replace(c) for c in self._comments.get(task_id, [])]
