# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ViewFilter(StrEnum):
    """
    Which derived subset of the task list is displayed.

    Notes:
    - "checked" / "unchecked" / "removed" are accepted by parse() as legacy tags.
    """

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"
    TRASHED = "trashed"

    @classmethod
    def parse(cls, raw: str | ViewFilter) -> ViewFilter:
        if isinstance(raw, ViewFilter):
            return raw
        key = str(raw).strip().lower()
        key = _LEGACY_TAGS.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"unknown filter {raw!r} (expected one of: {choices})") from None

    @property
    def label(self) -> str:
        return FILTER_LABELS[self]


_LEGACY_TAGS: dict[str, str] = {
    "checked": "completed",
    "unchecked": "pending",
    "removed": "trashed",
}

FILTER_LABELS: dict[ViewFilter, str] = {
    ViewFilter.ALL: "all tasks",
    ViewFilter.COMPLETED: "completed tasks",
    ViewFilter.PENDING: "current tasks",
    ViewFilter.TRASHED: "trash",
}


def filter_label(value: str | ViewFilter) -> str:
    return ViewFilter.parse(value).label


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    done: bool = False
    trashed: bool = False


# Newest first. Never mutated; every operation returns a new tuple.
TaskCollection = tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class TodoState:
    """One immutable snapshot of everything the editor owns."""

    tasks: TaskCollection = ()
    view_filter: ViewFilter = ViewFilter.ALL
    draft: str = ""
