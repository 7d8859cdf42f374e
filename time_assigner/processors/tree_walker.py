"""
Pre-order traversal helpers for task trees.
"""

from typing import Callable, Iterator

from ..core.node import TaskNode


def walk_pre_order(node: TaskNode, visit: Callable[[TaskNode], None]) -> None:
    """
    Visit a node, then each of its children left to right, recursively.
    
    Args:
        node: Root of the subtree to walk
        visit: Callback invoked once per node
    """
    visit(node)
    for child in node.children:
        walk_pre_order(child, visit)


def iter_pre_order(node: TaskNode) -> Iterator[TaskNode]:
    """Yield the nodes of a subtree in the same order as walk_pre_order."""
    yield node
    for child in node.children:
        yield from iter_pre_order(child)
