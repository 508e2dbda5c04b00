"""
Pre-order traversal over LibCST trees.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Callable, Iterator

import libcst as cst

Visitor = Callable[[cst.CSTNode], bool]


def walk(root: cst.CSTNode, visit: Visitor) -> None:
    """
    Depth-first, pre-order walk of ``root``.

    ``visit`` is called for every reached node and returns whether the walk
    should descend into that node's children. Children are visited left to
    right, in source order.

    An explicit stack is used instead of recursion: long expression chains in
    real modules nest deeper than the default recursion limit.
    """
    stack: list[cst.CSTNode] = [root]
    while stack:
        node = stack.pop()
        if not visit(node):
            continue
        # Reversed so the leftmost child is popped first.
        stack.extend(reversed(node.children))


def iter_nodes(root: cst.CSTNode) -> Iterator[cst.CSTNode]:
    """Yield every node under ``root`` (inclusive) in document order."""
    stack: list[cst.CSTNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
