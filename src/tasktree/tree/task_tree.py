# src/tasktree/tree/task_tree.py

"""
Function-style API over TaskNode.

This is the surface the presentation layer uses: one level is rendered with
child_count()/child_at(), and user actions map to create_node() + add_child()
and remove_child_at().
"""

from __future__ import annotations

from .task_models import IndexOutOfRange, TaskNode

__all__ = [
    "IndexOutOfRange",
    "TaskNode",
    "add_child",
    "child_at",
    "child_count",
    "create_node",
    "remove_child_at",
]


def create_node(name: str) -> TaskNode:
    """Create a task with no subtasks. Any name is accepted, including ""."""
    return TaskNode(name=name)


def add_child(parent: TaskNode, child: TaskNode) -> None:
    """Append `child` at the end of `parent`'s subtasks (no duplicate or cycle checks)."""
    parent.add_child(child)


def child_at(parent: TaskNode, index: int) -> TaskNode | None:
    """Return the subtask at `index`, or None if there is no such position."""
    return parent.child_at(index)


def remove_child_at(parent: TaskNode, index: int) -> None:
    """
    Remove the subtask at `index` together with its whole subtree.

    Raises IndexOutOfRange for an invalid position; the tree is left untouched.
    """
    parent.remove_child_at(index)


def child_count(parent: TaskNode) -> int:
    return parent.child_count()
