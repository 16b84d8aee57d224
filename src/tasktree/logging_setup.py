# src/tasktree/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Only tasktree records reach the REPL's stderr; anything else (python-dotenv,
    captured warnings) shows up there only at ERROR or above.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasktree" or record.name.startswith("tasktree."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasktree",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs for the task-list REPL.

    stderr gets lifecycle messages (start, deletions, exit) at `console_level`, so they
    do not interleave with the task listing printed on stdout. `tasktree.log` in
    `log_dir` also keeps the DEBUG trail of every add/remove on the tree and every
    screen opened, which is the only record of a session since the list is never saved.

    Replaces any handlers already on the root logger. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasktree.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    session_file = logging.FileHandler(str(log_file), encoding="utf-8")
    session_file.setLevel(file_level)
    session_file.setFormatter(fmt)
    root.addHandler(session_file)

    logging.captureWarnings(True)
    return log_file
