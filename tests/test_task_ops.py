# tests/test_task_ops.py

from __future__ import annotations

import pytest

from tasklist.tasks.task_models import Task, ViewFilter, filter_label
from tasklist.tasks.task_ops import (
    IdAllocator,
    add_task,
    edit_text,
    has_trashed,
    purge_trashed,
    reset,
    set_filter,
    toggle_done,
    toggle_trashed,
    view,
)

from .fakes import StepClock


def _mixed() -> tuple[Task, ...]:
    return (
        Task(id=5, text="e", done=False, trashed=False),
        Task(id=4, text="d", done=True, trashed=False),
        Task(id=3, text="c", done=True, trashed=True),
        Task(id=2, text="b", done=False, trashed=True),
        Task(id=1, text="a", done=False, trashed=False),
    )


def test_add_prepends_open_task(ids: IdAllocator) -> None:
    tasks = add_task((), "A", ids=ids)
    tasks = add_task(tasks, "B", ids=ids)

    assert [t.text for t in tasks] == ["B", "A"]
    assert all(not t.done and not t.trashed for t in tasks)
    assert tasks[0].id > tasks[1].id


@pytest.mark.parametrize("text", ["", None])
def test_add_empty_text_is_noop(ids: IdAllocator, text) -> None:
    before = _mixed()
    after = add_task(before, text, ids=ids)
    assert after is before
    assert ids.last == 0


def test_add_does_not_mutate_input(ids: IdAllocator) -> None:
    before = _mixed()
    after = add_task(before, "new", ids=ids)
    assert len(after) == len(before) + 1
    assert after[1:] == before
    assert len(before) == 5


def test_id_allocator_is_strictly_increasing_within_one_tick() -> None:
    ids = IdAllocator(clock=StepClock(start=1000, step=0))
    issued = [ids.next_id() for _ in range(5)]
    assert issued == [1000, 1001, 1002, 1003, 1004]


def test_id_allocator_survives_clock_going_backwards() -> None:
    clock = StepClock(start=5000, step=-10)
    ids = IdAllocator(clock=clock)
    issued = [ids.next_id() for _ in range(3)]
    assert issued == [5000, 5001, 5002]


def test_id_allocator_follows_clock_when_it_moves_forward() -> None:
    ids = IdAllocator(clock=StepClock(start=100, step=50))
    assert [ids.next_id() for _ in range(3)] == [100, 150, 200]


def test_edit_text_replaces_only_target() -> None:
    before = _mixed()
    after = edit_text(before, 4, "")

    assert after[1].text == ""
    assert after[1].id == 4 and after[1].done is True
    assert before[1].text == "d"
    for i in (0, 2, 3, 4):
        assert after[i] is before[i]


def test_unknown_id_is_noop_for_every_mutation() -> None:
    before = _mixed()
    assert edit_text(before, 999, "x") is before
    assert toggle_done(before, 999) is before
    assert toggle_trashed(before, 999) is before


@pytest.mark.parametrize("task_id", [1, 2, 3, 4, 5])
def test_toggle_done_twice_restores(task_id: int) -> None:
    before = _mixed()
    once = toggle_done(before, task_id)
    changed = next(t for t in once if t.id == task_id)
    original = next(t for t in before if t.id == task_id)
    assert changed.done is not original.done
    assert changed.trashed is original.trashed

    assert toggle_done(once, task_id) == before


@pytest.mark.parametrize("task_id", [1, 2, 3, 4, 5])
def test_toggle_trashed_twice_restores(task_id: int) -> None:
    before = _mixed()
    once = toggle_trashed(before, task_id)
    changed = next(t for t in once if t.id == task_id)
    original = next(t for t in before if t.id == task_id)
    assert changed.trashed is not original.trashed
    assert changed.done is original.done

    assert toggle_trashed(once, task_id) == before


def test_purge_removes_exactly_trashed_and_keeps_order() -> None:
    before = _mixed()
    after = purge_trashed(before)
    assert [t.id for t in after] == [5, 4, 1]
    assert not has_trashed(after)


def test_purge_without_trashed_is_noop() -> None:
    before = purge_trashed(_mixed())
    assert purge_trashed(before) is before
    assert purge_trashed(()) == ()


def test_views_partition_non_trashed_and_trash_is_complement() -> None:
    tasks = _mixed()
    all_ids = {t.id for t in view(tasks, ViewFilter.ALL)}
    done_ids = {t.id for t in view(tasks, ViewFilter.COMPLETED)}
    pending_ids = {t.id for t in view(tasks, ViewFilter.PENDING)}
    trash_ids = {t.id for t in view(tasks, ViewFilter.TRASHED)}

    assert done_ids.isdisjoint(pending_ids)
    assert done_ids | pending_ids == all_ids == {5, 4, 1}
    assert trash_ids == {t.id for t in tasks} - all_ids == {3, 2}


def test_view_preserves_order_and_is_deterministic() -> None:
    tasks = _mixed()
    assert [t.id for t in view(tasks, "trashed")] == [3, 2]
    assert view(tasks, ViewFilter.PENDING) == view(tasks, ViewFilter.PENDING)


def test_view_of_empty_collection_is_empty() -> None:
    for vf in ViewFilter:
        assert view((), vf) == ()


def test_reset_and_set_filter() -> None:
    assert reset() == ((), ViewFilter.ALL)
    assert set_filter("completed") is ViewFilter.COMPLETED
    assert set_filter("removed") is ViewFilter.TRASHED
    with pytest.raises(ValueError):
        set_filter("archived")


def test_filter_labels() -> None:
    assert filter_label(ViewFilter.ALL) == "all tasks"
    assert filter_label("completed") == "completed tasks"
    assert filter_label("pending") == "current tasks"
    assert ViewFilter.TRASHED.label == "trash"


def test_scenario_buy_milk(ids: IdAllocator) -> None:
    tasks = add_task((), "buy milk", ids=ids)
    assert [(t.text, t.done, t.trashed) for t in tasks] == [("buy milk", False, False)]

    tasks = toggle_done(tasks, tasks[0].id)
    assert [t.text for t in view(tasks, ViewFilter.COMPLETED)] == ["buy milk"]
    assert view(tasks, ViewFilter.PENDING) == ()


def test_scenario_trash_then_purge(ids: IdAllocator) -> None:
    tasks = add_task((), "old", ids=ids)
    task_id = tasks[0].id
    tasks = toggle_trashed(tasks, task_id)

    assert [t.id for t in view(tasks, ViewFilter.TRASHED)] == [task_id]

    tasks = purge_trashed(tasks)
    for vf in ViewFilter:
        assert view(tasks, vf) == ()


def test_add_whitespace_only_text_is_kept(ids: IdAllocator) -> None:
    tasks = add_task((), "   ", ids=ids)
    assert [t.text for t in tasks] == ["   "]


def test_ids_are_not_reused_after_purge(ids: IdAllocator) -> None:
    tasks = add_task((), "a", ids=ids)
    tasks = add_task(tasks, "b", ids=ids)
    earlier = {t.id for t in tasks}
    for task in tasks:
        tasks = toggle_trashed(tasks, task.id)
    tasks = purge_trashed(tasks)
    assert tasks == ()

    tasks = add_task(tasks, "c", ids=ids)
    assert tasks[0].id > max(earlier)
