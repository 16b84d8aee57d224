# src/tasktree/core/screens.py

"""
Level-by-level browsing over the task tree.

A Screen shows the direct subtasks of one task. The Navigator keeps the stack of
open screens (root first) and turns user actions into tree operations:
- add:    create_node() + add_child() on the current screen's task
- delete: remove_child_at() on a row index taken from the last render
- open:   drill down into a row's task (pushes a new Screen)
- back:   pop the current screen
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from ..tree.task_tree import (
    IndexOutOfRange,
    TaskNode,
    add_child,
    child_at,
    child_count,
    create_node,
    remove_child_at,
)

logger = logging.getLogger(__name__)


class ScreenInUseError(RuntimeError):
    """Raised when deleting a task whose subtasks are shown by an open screen."""


@dataclass(frozen=True, slots=True)
class Row:
    index: int
    name: str
    subtask_count: int


@dataclass(slots=True)
class Screen:
    title: str
    task: TaskNode

    def rows(self) -> list[Row]:
        out: list[Row] = []
        for i in range(child_count(self.task)):
            # i < child_count, so child_at always finds a task here.
            sub = cast(TaskNode, child_at(self.task, i))
            out.append(Row(index=i, name=sub.name, subtask_count=child_count(sub)))
        return out


class Navigator:
    """Screen stack over a single root task."""

    def __init__(self, root: TaskNode, *, root_title: str | None = None) -> None:
        self._stack: list[Screen] = [Screen(title=root_title or root.name, task=root)]

    @property
    def current(self) -> Screen:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """0 on the root screen."""
        return len(self._stack) - 1

    def path(self) -> list[str]:
        return [s.title for s in self._stack]

    def rows(self) -> list[Row]:
        return self.current.rows()

    def add_task(self, name: str | None) -> TaskNode | None:
        """Add a subtask to the current screen. A missing or blank name cancels the add."""
        if name is None or not name.strip():
            logger.debug("Add cancelled on %r: no name entered.", self.current.title)
            return None
        node = create_node(name.strip())
        add_child(self.current.task, node)
        return node

    def delete_row(self, index: int) -> TaskNode:
        """
        Remove the row at `index` from the current screen and return the removed task.

        Raises IndexOutOfRange for an invalid row, ScreenInUseError if the task is
        shown by an open screen.
        """
        parent = self.current.task
        target = child_at(parent, index)
        if target is None:
            raise IndexOutOfRange(index, child_count(parent))
        if any(s.task is target for s in self._stack):
            raise ScreenInUseError(f"task {target.name!r} is open on the screen stack")
        remove_child_at(parent, index)
        logger.info("Deleted task %r from %r.", target.name, self.current.title)
        return target

    def open_row(self, index: int) -> Screen | None:
        """Drill down into the row at `index`; None if there is no such row."""
        sub = child_at(self.current.task, index)
        if sub is None:
            return None
        screen = Screen(title=sub.name, task=sub)
        self._stack.append(screen)
        logger.debug("Opened %r (depth=%d).", sub.name, self.depth)
        return screen

    def back(self) -> bool:
        if len(self._stack) <= 1:
            return False
        self._stack.pop()
        return True
