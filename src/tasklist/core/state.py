# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_models import ViewFilter
from ..tasks.task_store import TaskStore
from .ports import TitleSink


@dataclass(slots=True)
class AppState:
    # Settings object (config.Settings in the app, SimpleNamespace in tests).
    settings: Any

    store: TaskStore
    title_sink: TitleSink | None = None

    def title_prefix(self) -> str:
        return str(getattr(self.settings, "title_prefix", "TODO") or "TODO")

    def publish_title(self, _view_filter: ViewFilter | None = None) -> str:
        """Push the current title to the sink (if any) and return it."""
        title = self.store.title(self.title_prefix())
        if self.title_sink is not None:
            self.title_sink.set_title(title)
        return title
