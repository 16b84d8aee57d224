# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktree.cli.bootstrap import create_initial_state
from tasktree.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasktree-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        root_title="Task List",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with an empty root list, built the same way the CLI builds it."""
    return create_initial_state(settings=settings)
