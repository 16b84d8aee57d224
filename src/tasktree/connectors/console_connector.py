# src/tasktree/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import add_and_render, render_current
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str, emit: Callable[[str], None] | None = None) -> str:
    """
    Turn one console line into a reply.

    Slash commands go to the registry; any other text is taken verbatim as the name
    of a new task on the current screen.
    """
    with state.lock:
        reply = command_registry.handle(state, line, emit=emit)
        if reply is not None:
            return reply
        return add_and_render(state, line)


def run_console_loop(state: AppState, *, input_fn: InputFn = input) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task name to add it. Use /help for commands. Use /exit to quit.\n")
    _print_ts(render_current(state))

    def emit(text: str) -> None:
        # Immediate user-visible feedback for multi-step operations
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input_fn(f"{state.navigator.current.title}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _print_ts(reply)

    logger.info("Console connector finished.")
