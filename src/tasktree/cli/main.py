# src/tasktree/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
The REPL is the only consumer of the tree, so the process lives exactly as long as it.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    # Ctrl+C and EOF end the REPL itself.
    try:
        run_console_loop(state)
    finally:
        logger.info(
            "Bye. Discarding %d top-level tasks (the list is kept in memory only).",
            state.root.child_count(),
        )


if __name__ == "__main__":
    main()
