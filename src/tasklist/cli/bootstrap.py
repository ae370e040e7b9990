# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the in-memory TaskStore,
- wires the title sink so filter changes reach the terminal title.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.terminal_title import TerminalTitleSink
from ..core.ports import TitleSink
from ..core.state import AppState
from ..tasks.task_models import ViewFilter
from ..tasks.task_ops import IdAllocator
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    title_sink: TitleSink | None = None,
    ids: IdAllocator | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    default_filter = ViewFilter.parse(getattr(settings, "default_filter", ViewFilter.ALL))
    store = TaskStore(ids=ids, default_filter=default_filter)

    if title_sink is None:
        title_sink = TerminalTitleSink(enabled=bool(getattr(settings, "set_terminal_title", True)))

    state = AppState(settings=settings, store=store, title_sink=title_sink)
    store.subscribe(state.publish_title)
    state.publish_title()
    return state
