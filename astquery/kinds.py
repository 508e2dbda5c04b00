"""
Node kind lookup: map configuration strings to LibCST node classes.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import inspect
from typing import Dict, Type, Union

import libcst as cst

from .errors import FilterConfigurationError

KIND_ALIASES: Dict[str, Type[cst.CSTNode]] = {
    "class": cst.ClassDef,
    "function": cst.FunctionDef,
    "method": cst.FunctionDef,
    "attribute": cst.Attribute,
    "member": cst.Attribute,
    "name": cst.Name,
    "call": cst.Call,
    "import": cst.ImportAlias,
    "param": cst.Param,
}


def _node_classes() -> Dict[str, Type[cst.CSTNode]]:
    out: Dict[str, Type[cst.CSTNode]] = {}
    for attr in dir(cst):
        obj = getattr(cst, attr)
        if inspect.isclass(obj) and issubclass(obj, cst.CSTNode):
            out[attr.lower()] = obj
    return out


_NODE_CLASSES = _node_classes()


def is_kind(value: object) -> bool:
    return inspect.isclass(value) and issubclass(value, cst.CSTNode)


def resolve_kind(kind: Union[str, Type[cst.CSTNode]]) -> Type[cst.CSTNode]:
    """
    Return the LibCST class for ``kind``.

    Accepts a LibCST node class, an alias from KIND_ALIASES, or a LibCST class
    name (case-insensitive, e.g. "ClassDef").

    Raises:
        FilterConfigurationError: if ``kind`` names no LibCST node class
    """
    if is_kind(kind):
        return kind
    if not isinstance(kind, str) or not kind.strip():
        raise FilterConfigurationError(
            f"Node kind must be a LibCST node class or its name, got {kind!r}",
            field="kind",
        )
    key = kind.strip().lower()
    if key in KIND_ALIASES:
        return KIND_ALIASES[key]
    if key in _NODE_CLASSES:
        return _NODE_CLASSES[key]
    raise FilterConfigurationError(f"Unknown node kind: {kind}", field="kind")
