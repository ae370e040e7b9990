# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState
from tasklist.tasks.task_models import ViewFilter
from tasklist.tasks.task_ops import IdAllocator
from tasklist.tasks.task_store import TaskStore

from .fakes import RecordingTitleSink, StepClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        title_prefix="TODO",
        set_terminal_title=False,
        default_filter=ViewFilter.ALL,
    )


@pytest.fixture()
def ids() -> IdAllocator:
    # Frozen clock: ids only advance because of the monotonic clamp.
    return IdAllocator(clock=StepClock(step=0))


@pytest.fixture()
def store(ids: IdAllocator) -> TaskStore:
    return TaskStore(ids=ids)


@pytest.fixture()
def title_sink() -> RecordingTitleSink:
    return RecordingTitleSink()


@pytest.fixture()
def state(settings: SimpleNamespace, title_sink: RecordingTitleSink, ids: IdAllocator) -> AppState:
    return create_initial_state(settings=settings, title_sink=title_sink, ids=ids)
