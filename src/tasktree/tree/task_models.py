# src/tasktree/tree/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class IndexOutOfRange(IndexError):
    """Raised when removing a child by a position that does not exist."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"child index {index} out of range (count={count})")
        self.index = index
        self.count = count


@dataclass(slots=True, eq=False)
class TaskNode:
    """
    A task that owns an ordered list of subtasks.

    Notes:
    - every node is both a leaf and a container; subtasks are TaskNode too
    - children are only ever appended or removed by position
    - identity equality: two tasks with the same name are still different tasks
    """

    name: str
    children: list[TaskNode] = field(default_factory=list)

    def add_child(self, child: TaskNode) -> None:
        self.children.append(child)
        logger.debug("Added subtask %r to %r (count=%d)", child.name, self.name, len(self.children))

    def child_at(self, index: int) -> TaskNode | None:
        # Negative indexes never wrap around.
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def remove_child_at(self, index: int) -> None:
        count = len(self.children)
        if not 0 <= index < count:
            raise IndexOutOfRange(index, count)
        removed = self.children.pop(index)
        logger.debug(
            "Removed subtask %r (subtasks=%d) from %r at index=%d",
            removed.name,
            len(removed.children),
            self.name,
            index,
        )

    def child_count(self) -> int:
        return len(self.children)
