# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from . import task_ops
from .task_models import Task, TaskCollection, TodoState, ViewFilter

logger = logging.getLogger(__name__)

FilterListener = Callable[[ViewFilter], None]


@dataclass(frozen=True, slots=True)
class TaskAffordances:
    """What the host may offer for one rendered task."""

    can_toggle_done: bool
    can_edit_text: bool
    trash_action: str  # "delete" or "restore"


class TaskStore:
    """
    In-memory owner of the task list, the active filter and the input draft.

    State is a single immutable TodoState snapshot. Each operation computes a new
    snapshot with the pure functions from task_ops and swaps it in, so snapshots
    handed out earlier stay valid.

    Thread-safety:
    - none; one presentation layer drives one store
    """

    def __init__(
        self,
        *,
        ids: task_ops.IdAllocator | None = None,
        default_filter: ViewFilter = ViewFilter.ALL,
    ) -> None:
        self._ids = ids or task_ops.IdAllocator()
        self._state = TodoState(view_filter=default_filter)
        self._listeners: list[FilterListener] = []
        logger.info("TaskStore ready filter=%s", default_filter.value)

    # ---- snapshot ----

    @property
    def state(self) -> TodoState:
        return self._state

    @property
    def tasks(self) -> TaskCollection:
        return self._state.tasks

    @property
    def view_filter(self) -> ViewFilter:
        return self._state.view_filter

    @property
    def draft(self) -> str:
        return self._state.draft

    def _swap_tasks(self, tasks: TaskCollection) -> TaskCollection:
        if tasks is not self._state.tasks:
            self._state = replace(self._state, tasks=tasks)
        return tasks

    # ---- filter observers ----

    def subscribe(self, listener: FilterListener) -> None:
        """Call `listener(new_filter)` whenever the active filter changes."""
        self._listeners.append(listener)

    def _notify(self, view_filter: ViewFilter) -> None:
        for listener in list(self._listeners):
            listener(view_filter)

    # ---- mutations ----

    def set_draft(self, text: str) -> None:
        self._state = replace(self._state, draft=text)

    def submit_draft(self) -> TaskCollection:
        """Add the draft as a task and clear it. Empty draft: no-op."""
        if not self._state.draft:
            return self._state.tasks
        tasks = task_ops.add_task(self._state.tasks, self._state.draft, ids=self._ids)
        self._state = replace(self._state, tasks=tasks, draft="")
        return tasks

    def add(self, text: str | None) -> TaskCollection:
        return self._swap_tasks(task_ops.add_task(self._state.tasks, text, ids=self._ids))

    def edit_text(self, task_id: int, new_text: str) -> TaskCollection:
        return self._swap_tasks(task_ops.edit_text(self._state.tasks, task_id, new_text))

    def toggle_done(self, task_id: int) -> TaskCollection:
        return self._swap_tasks(task_ops.toggle_done(self._state.tasks, task_id))

    def toggle_trashed(self, task_id: int) -> TaskCollection:
        return self._swap_tasks(task_ops.toggle_trashed(self._state.tasks, task_id))

    def purge_trashed(self) -> TaskCollection:
        return self._swap_tasks(task_ops.purge_trashed(self._state.tasks))

    def reset(self) -> TodoState:
        previous = self._state.view_filter
        tasks, view_filter = task_ops.reset()
        self._state = TodoState(tasks=tasks, view_filter=view_filter)
        logger.info("TaskStore reset")
        if previous is not view_filter:
            self._notify(view_filter)
        return self._state

    def set_filter(self, value: str | ViewFilter) -> ViewFilter:
        """Raises ValueError for an unknown tag; state is untouched in that case."""
        view_filter = task_ops.set_filter(value)
        previous = self._state.view_filter
        self._state = replace(self._state, view_filter=view_filter)
        if previous is not view_filter:
            logger.debug("Filter %s -> %s", previous.value, view_filter.value)
            self._notify(view_filter)
        return view_filter

    # ---- derived views ----

    def get(self, task_id: int) -> Task | None:
        return task_ops.find_task(self._state.tasks, task_id)

    @property
    def visible(self) -> TaskCollection:
        return task_ops.view(self._state.tasks, self._state.view_filter)

    @property
    def has_trashed(self) -> bool:
        return task_ops.has_trashed(self._state.tasks)

    @property
    def can_add(self) -> bool:
        return self._state.view_filter not in (ViewFilter.COMPLETED, ViewFilter.TRASHED)

    @property
    def can_purge(self) -> bool:
        return self._state.view_filter is ViewFilter.TRASHED and self.has_trashed

    @staticmethod
    def task_affordances(task: Task) -> TaskAffordances:
        return TaskAffordances(
            can_toggle_done=not task.trashed,
            can_edit_text=not (task.done or task.trashed),
            trash_action="restore" if task.trashed else "delete",
        )

    def title(self, prefix: str = "TODO") -> str:
        return f"{prefix}: {self._state.view_filter.label}"
