# src/tasklist/tasks/task_ops.py

"""
Pure state transitions over an immutable task collection.

Every function takes the current collection and returns a new one. Input tuples
and Task records are never mutated; a changed task is a fresh record built with
dataclasses.replace, unchanged tasks keep their identity.

Unknown ids and empty text are policy no-ops: the input collection is returned
as-is (same object), never an error.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace

from .task_models import Task, TaskCollection, ViewFilter

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdAllocator:
    """
    Issues task ids from wall-clock milliseconds, clamped to stay strictly increasing.

    Two calls inside the same millisecond (or after the clock steps backwards)
    still get distinct ids: next id = max(now_ms, last + 1).
    """

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def next_id(self) -> int:
        nid = max(int(self._clock()), self._last + 1)
        self._last = nid
        return nid


def add_task(tasks: TaskCollection, text: str | None, *, ids: IdAllocator) -> TaskCollection:
    """Prepend a new open task. Empty or None text is a no-op."""
    if not text:
        logger.debug("add_task: empty text, ignored")
        return tasks
    task = Task(id=ids.next_id(), text=text)
    logger.debug("Task added id=%s", task.id)
    return (task, *tasks)


def _update_one(
    tasks: TaskCollection, task_id: int, change: Callable[[Task], Task], op: str
) -> TaskCollection:
    for idx, task in enumerate(tasks):
        if task.id == task_id:
            return (*tasks[:idx], change(task), *tasks[idx + 1 :])
    logger.debug("%s: no task id=%s, ignored", op, task_id)
    return tasks


def edit_text(tasks: TaskCollection, task_id: int, new_text: str) -> TaskCollection:
    # Any string is accepted, including "".
    return _update_one(tasks, task_id, lambda t: replace(t, text=new_text), "edit_text")


def toggle_done(tasks: TaskCollection, task_id: int) -> TaskCollection:
    return _update_one(tasks, task_id, lambda t: replace(t, done=not t.done), "toggle_done")


def toggle_trashed(tasks: TaskCollection, task_id: int) -> TaskCollection:
    return _update_one(
        tasks, task_id, lambda t: replace(t, trashed=not t.trashed), "toggle_trashed"
    )


def purge_trashed(tasks: TaskCollection) -> TaskCollection:
    """Drop every trashed task. Nothing trashed -> the same collection back."""
    if not has_trashed(tasks):
        return tasks
    kept = tuple(t for t in tasks if not t.trashed)
    logger.debug("purge_trashed: removed %d task(s)", len(tasks) - len(kept))
    return kept


def reset() -> tuple[TaskCollection, ViewFilter]:
    return (), ViewFilter.ALL


def set_filter(value: str | ViewFilter) -> ViewFilter:
    return ViewFilter.parse(value)


def has_trashed(tasks: TaskCollection) -> bool:
    return any(t.trashed for t in tasks)


def find_task(tasks: TaskCollection, task_id: int) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def _keep(task: Task, view_filter: ViewFilter) -> bool:
    if view_filter is ViewFilter.ALL:
        return not task.trashed
    if view_filter is ViewFilter.COMPLETED:
        return task.done and not task.trashed
    if view_filter is ViewFilter.PENDING:
        return not task.done and not task.trashed
    if view_filter is ViewFilter.TRASHED:
        return task.trashed
    raise ValueError(f"unhandled filter: {view_filter!r}")


def view(tasks: TaskCollection, view_filter: str | ViewFilter) -> TaskCollection:
    """Project the collection through a filter, keeping collection order."""
    vf = ViewFilter.parse(view_filter)
    return tuple(t for t in tasks if _keep(t, vf))
