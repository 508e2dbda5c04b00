"""
Find: run a filter over one or more tree roots.

Matching prunes: once a node matches, its subtree is not searched, so a query
never returns both a node and one of its descendants.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

import libcst as cst

from .filters import AnyFilter, Filter, as_filter
from .loader import ParsedModule
from .names import get_name
from .walker import walk

logger = logging.getLogger(__name__)

Roots = Union[cst.CSTNode, Sequence[cst.CSTNode]]


@dataclass(frozen=True)
class Match:
    """A located match, for reporting."""

    path: str
    node: cst.CSTNode
    node_type: str
    name: Optional[str]
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "node_type": self.node_type,
            "name": self.name,
            "start_line": self.start_line,
            "start_col": self.start_col,
            "end_line": self.end_line,
            "end_col": self.end_col,
        }


def _as_roots(roots: Roots) -> Sequence[cst.CSTNode]:
    if isinstance(roots, cst.CSTNode):
        return (roots,)
    return roots


def _find_in(root: cst.CSTNode, flt: Filter) -> List[cst.CSTNode]:
    found: List[cst.CSTNode] = []

    def visit(node: cst.CSTNode) -> bool:
        if flt.matches(node):
            found.append(node)
            return False
        return True

    walk(root, visit)
    return found


def find(roots: Roots, flt: AnyFilter) -> List[cst.CSTNode]:
    """
    Return all nodes under ``roots`` matching ``flt``, in document order.

    Results of successive roots are concatenated in the order the roots are
    given. Matching nodes are not searched for further matches.

    Args:
        roots: root node or ordered sequence of root nodes
        flt: Filter, or plain ``node -> bool`` callable
    """
    flt = as_filter(flt)
    found: List[cst.CSTNode] = []
    for root in _as_roots(roots):
        found.extend(_find_in(root, flt))
    return found


def find_one(roots: Roots, flt: AnyFilter) -> Optional[cst.CSTNode]:
    """First match in document order, or None."""
    flt = as_filter(flt)
    result: List[cst.CSTNode] = []

    def visit(node: cst.CSTNode) -> bool:
        if result:
            return False
        if flt.matches(node):
            result.append(node)
            return False
        return True

    for root in _as_roots(roots):
        walk(root, visit)
        if result:
            return result[0]
    return None


def locate(parsed: Iterable[ParsedModule], flt: AnyFilter) -> List[Match]:
    """Run ``find`` over parsed modules and attach source positions."""
    flt = as_filter(flt)
    out: List[Match] = []
    for pm in parsed:
        nodes = find(pm.module, flt)
        if not nodes:
            continue
        positions = pm.positions
        for node in nodes:
            pos = positions[node]
            out.append(
                Match(
                    path=pm.path,
                    node=node,
                    node_type=type(node).__name__,
                    name=get_name(node),
                    start_line=pos.start.line,
                    start_col=pos.start.column,
                    end_line=pos.end.line,
                    end_col=pos.end.column,
                )
            )
        logger.debug(f"{pm.path}: {len(nodes)} match(es) for {flt!r}")
    return out
