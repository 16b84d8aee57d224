# src/tasktree/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tree.task_models import TaskNode
from .screens import Navigator


@dataclass
class AppState:
    """
    Runtime state shared by connectors and command handlers.

    The tree lives only in memory: it is created at startup and dropped on exit.
    """

    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    root: TaskNode
    navigator: Navigator

    # Serializes user actions: one command mutates the tree at a time.
    lock: threading.Lock = field(default_factory=threading.Lock)
