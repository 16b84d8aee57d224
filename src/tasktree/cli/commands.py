# src/tasktree/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.screens import Row, ScreenInUseError
from ..core.state import AppState
from ..tree.task_models import IndexOutOfRange

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True hands the handler the rest of the line as a single argument,
        inner whitespace untouched (used for free-text task names).
        """
        aliases = aliases or []
        key = name.lower()
        self._help[key] = help_text
        for alias in [key, *(a.lower() for a in aliases)]:
            self._handlers[alias] = handler
            if raw_args:
                self._raw.add(alias)
            else:
                self._raw.discard(alias)

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

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw:
            rest = line[1:].split(maxsplit=1)
            args = rest[1:]

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
        lines.append("  (any other text adds a task with that name)")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_row(args: list[str], usage: str) -> tuple[int | None, str | None]:
    """Parse a 1-based row number into a 0-based index. Returns (index, error_text)."""
    if not args:
        return None, usage
    try:
        n = int(args[0])
    except ValueError:
        return None, f"Not a row number: {args[0]!r}. {usage}"
    return n - 1, None


def _subtasks_phrase(n: int) -> str:
    return "1 subtask" if n == 1 else f"{n} subtasks"


def _format_row(row: Row) -> str:
    suffix = f" ({_subtasks_phrase(row.subtask_count)}) >" if row.subtask_count else " >"
    return f"  {row.index + 1}. {row.name}{suffix}"


def render_current(state: AppState) -> str:
    nav = state.navigator
    header = " / ".join(nav.path())
    rows = nav.rows()
    if not rows:
        return f"{header}\n  (no tasks yet, type a name or /add <name>)"
    return "\n".join([header, *(_format_row(r) for r in rows)])


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_current(state)


def add_and_render(state: AppState, name: str | None) -> str:
    node = state.navigator.add_task(name)
    if node is None:
        return "No name entered, nothing added."
    return f"Added {node.name!r}.\n{render_current(state)}"


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <name...>  -> add a task to the current screen
    /add            -> nothing entered, nothing added
    """
    return add_and_render(state, args[0] if args else None)


def cmd_rm(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /rm <row>  -> delete the task at that row (and all of its subtasks)
    """
    index, err = _parse_row(args, "Usage: /rm <row>")
    if index is None:
        return err or "Usage: /rm <row>"

    nav = state.navigator
    try:
        removed = nav.delete_row(index)
    except IndexOutOfRange:
        return f"No row {index + 1} here. {len(nav.rows())} rows on this screen."
    except ScreenInUseError as e:
        return f"Cannot delete: {e}."

    if removed.children and emit:
        emit(f"Deleted {removed.name!r} together with {_subtasks_phrase(len(removed.children))}.")
    return f"Deleted {removed.name!r}.\n{render_current(state)}"


def cmd_open(state: AppState, args: list[str]) -> str:
    """
    /open <row>  -> show the subtasks of the task at that row
    """
    index, err = _parse_row(args, "Usage: /open <row>")
    if index is None:
        return err or "Usage: /open <row>"

    if state.navigator.open_row(index) is None:
        return f"No row {index + 1} here."
    return render_current(state)


def cmd_back(state: AppState, args: list[str]) -> str:
    if not state.navigator.back():
        return f"Already at the top.\n{render_current(state)}"
    return render_current(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    nav = state.navigator
    return (
        "Status:\n"
        f"  Screen: {' / '.join(nav.path())}\n"
        f"  Depth: {nav.depth}\n"
        f"  Top-level tasks: {state.root.child_count()}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("ls", cmd_list, help_text="List tasks on the current screen.", aliases=["list"])
registry.register("add", cmd_add, help_text="Add a task: /add <name>.", raw_args=True)
registry.register("rm", cmd_rm, help_text="Delete a task and its subtasks: /rm <row>.", aliases=["del"])
registry.register("open", cmd_open, help_text="Show subtasks of a task: /open <row>.", aliases=["cd"])
registry.register("back", cmd_back, help_text="Go back to the parent screen.", aliases=["up", ".."])
registry.register("status", cmd_status, help_text="Show the current screen and depth.")
