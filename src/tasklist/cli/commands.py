# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task, ViewFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandArgs(list[str]):
    """Whitespace-split arguments that also keep the raw text after the command name."""

    def __init__(self, text: str) -> None:
        super().__init__(text.split())
        self.text = text


class CommandRegistry:
    """Simple slash-command registry used by the console host (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(None, 1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = CommandArgs(parts[1] if len(parts) > 1 else "")

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (aliases: /quit). Tasks are not saved.")
        lines.append("  (plain text without a leading slash adds a task)")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering helpers ----


def render_view(state: AppState) -> str:
    store = state.store
    header = f"{store.title(state.title_prefix())} ({len(store.visible)})"
    if not store.visible:
        return f"{header}\n  (empty)"
    lines = [header]
    for pos, task in enumerate(store.visible, start=1):
        mark = "x" if task.done else " "
        suffix = "  [trashed]" if task.trashed else ""
        lines.append(f"  {pos}. [{mark}] {task.text}{suffix}")
    return "\n".join(lines)


def _raw_text(args: list[str]) -> str:
    """Text after the command name as typed; inner whitespace is kept."""
    return getattr(args, "text", None) or " ".join(args)


def _resolve(state: AppState, args: list[str], usage: str) -> Task | str:
    """Map a 1-based position in the current view to a task, or return an error line."""
    if not args:
        return usage
    try:
        pos = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]!r}. {usage}"
    visible = state.store.visible
    if pos < 1 or pos > len(visible):
        return f"No task #{pos} in {state.store.view_filter.label}."
    return visible[pos - 1]


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_view(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    total = len(store.tasks)
    trashed = sum(1 for t in store.tasks if t.trashed)
    done = sum(1 for t in store.tasks if t.done and not t.trashed)
    return (
        "Status:\n"
        f"  Filter: {store.view_filter.value} ({store.view_filter.label})\n"
        f"  Tasks: {total} total, {done} completed, {total - trashed - done} current, "
        f"{trashed} in trash"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>  -> add a task (not available in the completed/trash views)
    """
    if not state.store.can_add:
        return f"Cannot add tasks while viewing {state.store.view_filter.label}."
    text = _raw_text(args)
    if not text:
        return "Usage: /add <text>"
    state.store.add(text)
    return render_view(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <n> <text>  -> replace the text of task #n (empty text allowed)
    """
    found = _resolve(state, args, "Usage: /edit <n> <text>")
    if isinstance(found, str):
        return found
    if not state.store.task_affordances(found).can_edit_text:
        return f"Task #{args[0]} is completed or trashed and cannot be edited."
    rest = _raw_text(args).split(None, 1)
    state.store.edit_text(found.id, rest[1] if len(rest) > 1 else "")
    return render_view(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <n>  -> toggle completion of task #n
    """
    found = _resolve(state, args, "Usage: /done <n>")
    if isinstance(found, str):
        return found
    if not state.store.task_affordances(found).can_toggle_done:
        return f"Task #{args[0]} is in the trash. Restore it first."
    state.store.toggle_done(found.id)
    return render_view(state)


def cmd_trash(state: AppState, args: list[str]) -> str:
    """
    /trash <n>  -> move task #n to the trash, or restore it when already trashed
    """
    found = _resolve(state, args, "Usage: /trash <n>")
    if isinstance(found, str):
        return found
    action = state.store.task_affordances(found).trash_action
    state.store.toggle_trashed(found.id)
    verb = "Restored" if action == "restore" else "Deleted"
    return f"{verb}: {found.text}\n{render_view(state)}"


def cmd_purge(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if state.store.view_filter is not ViewFilter.TRASHED:
        return "Switch to the trash first: /filter trashed"
    if not state.store.can_purge:
        return "Trash is already empty."
    count = sum(1 for t in state.store.tasks if t.trashed)
    if emit:
        emit(f"Emptying trash ({count} task(s))...")
    state.store.purge_trashed()
    logger.info("Trash emptied: %d task(s)", count)
    return render_view(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                -> show current filter
    /filter <all|completed|pending|trashed>
    """
    if not args:
        choices = ", ".join(f"{f.value} ({f.label})" for f in ViewFilter)
        return f"Current filter: {state.store.view_filter.value}. Choices: {choices}"
    try:
        state.store.set_filter(args[0])
    except ValueError as e:
        return str(e)
    return render_view(state)


def cmd_reset(state: AppState, args: list[str]) -> str:
    state.store.reset()
    return "All tasks cleared.\n" + render_view(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show the active filter and task counts.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("edit", cmd_edit, help_text="Edit task text: /edit <n> <text>.", aliases=["e"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <n>.", aliases=["d"])
registry.register(
    "trash", cmd_trash, help_text="Delete or restore a task: /trash <n>.", aliases=["rm", "restore"]
)
registry.register("purge", cmd_purge, help_text="Empty the trash (trash view only).")
registry.register(
    "filter",
    cmd_filter,
    help_text="Switch view: /filter all | completed | pending | trashed.",
    aliases=["f"],
)
registry.register("reset", cmd_reset, help_text="Discard every task and return to all tasks.")
