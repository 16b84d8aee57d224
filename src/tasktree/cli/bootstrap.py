# src/tasktree/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the root task and its navigator into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.screens import Navigator
from ..core.state import AppState
from ..tree.task_tree import create_node

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState with an empty root task list.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    root = create_node(settings.root_title)
    state = AppState(
        settings=settings,
        root=root,
        navigator=Navigator(root),
    )
    logger.debug("Initial state ready (root=%r).", root.name)
    return state
