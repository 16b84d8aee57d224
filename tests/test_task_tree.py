# tests/test_task_tree.py

from __future__ import annotations

import pytest

from tasktree.tree.task_tree import (
    IndexOutOfRange,
    add_child,
    child_at,
    child_count,
    create_node,
    remove_child_at,
)


def test_create_node_accepts_any_name() -> None:
    empty = create_node("")
    assert empty.name == ""
    assert child_count(empty) == 0

    a = create_node("dup")
    b = create_node("dup")
    assert a is not b
    assert a != b


def test_add_child_keeps_append_order() -> None:
    parent = create_node("parent")
    kids = [create_node(f"t{i}") for i in range(5)]
    for k in kids:
        add_child(parent, k)

    assert child_count(parent) == len(kids)
    for i, k in enumerate(kids):
        assert child_at(parent, i) is k


def test_add_same_child_twice_appends_twice() -> None:
    parent = create_node("parent")
    kid = create_node("kid")
    add_child(parent, kid)
    add_child(parent, kid)

    assert child_count(parent) == 2
    assert child_at(parent, 0) is child_at(parent, 1)


@pytest.mark.parametrize("index", [-2, -1, 0, 1, 5])
def test_child_at_out_of_range_is_none_on_empty(index: int) -> None:
    assert child_at(create_node("empty"), index) is None


def test_child_at_negative_does_not_wrap() -> None:
    parent = create_node("parent")
    add_child(parent, create_node("only"))
    assert child_at(parent, -1) is None
    assert child_at(parent, 1) is None
    assert child_at(parent, 0) is not None


def test_remove_shifts_following_children() -> None:
    parent = create_node("parent")
    a, b, c, d = (create_node(n) for n in "abcd")
    for k in (a, b, c, d):
        add_child(parent, k)

    remove_child_at(parent, 1)

    assert child_count(parent) == 3
    assert [child_at(parent, i) for i in range(3)] == [a, c, d]


@pytest.mark.parametrize("index", [0, 1, -1])
def test_remove_on_empty_raises(index: int) -> None:
    parent = create_node("empty")
    with pytest.raises(IndexOutOfRange):
        remove_child_at(parent, index)
    assert child_count(parent) == 0


def test_remove_out_of_range_leaves_tree_unchanged() -> None:
    parent = create_node("parent")
    a, b = create_node("a"), create_node("b")
    add_child(parent, a)
    add_child(parent, b)

    with pytest.raises(IndexOutOfRange) as exc:
        remove_child_at(parent, 2)

    assert exc.value.index == 2
    assert exc.value.count == 2
    assert isinstance(exc.value, IndexError)
    assert [child_at(parent, 0), child_at(parent, 1)] == [a, b]


def test_groceries_scenario() -> None:
    root = create_node("Groceries")
    for name in ("Milk", "Eggs", "Bread"):
        add_child(root, create_node(name))

    assert child_count(root) == 3
    eggs = child_at(root, 1)
    assert eggs is not None and eggs.name == "Eggs"

    remove_child_at(root, 0)

    assert child_count(root) == 2
    first, second = child_at(root, 0), child_at(root, 1)
    assert first is not None and first.name == "Eggs"
    assert second is not None and second.name == "Bread"


def _reachable(node) -> list:
    out = []
    for i in range(child_count(node)):
        sub = child_at(node, i)
        out.append(sub)
        out.extend(_reachable(sub))
    return out


def test_removing_a_task_drops_its_whole_subtree() -> None:
    root = create_node("Groceries")
    milk = create_node("Milk")
    add_child(root, milk)
    add_child(root, create_node("Eggs"))

    fridge = create_node("Clean fridge")
    add_child(milk, fridge)
    shelf = create_node("Wipe shelf")
    add_child(fridge, shelf)
    assert child_count(milk) == 1

    remove_child_at(root, 0)

    reachable = _reachable(root)
    assert all(n is not milk for n in reachable)
    assert all(n is not fridge for n in reachable)
    assert all(n is not shelf for n in reachable)
    assert [n.name for n in reachable] == ["Eggs"]


def test_methods_match_functions() -> None:
    root = create_node("root")
    root.add_child(create_node("x"))
    assert root.child_count() == child_count(root) == 1
    assert root.child_at(0) is child_at(root, 0)
    root.remove_child_at(0)
    assert root.child_count() == 0
