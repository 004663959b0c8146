"""Tree traversal helpers."""

from __future__ import annotations

from typing import Iterator, Sequence

from .models import Component


def walk(tree: Sequence[Component]) -> Iterator[Component]:
    """Yield every node of ``tree`` in document (depth-first, pre-order) order.

    Uses an explicit stack so arbitrarily deep trees do not grow the call
    stack.
    """
    stack = list(reversed(tree))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def has_trigger(tree: Sequence[Component], trigger: str) -> bool:
    """Return True if any node in the tree has an animation with ``trigger``."""
    return any(
        animation.trigger == trigger
        for node in walk(tree)
        for animation in node.animations
    )


def count_nodes(tree: Sequence[Component]) -> int:
    return sum(1 for _ in walk(tree))
