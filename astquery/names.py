"""
Identifier extraction for LibCST nodes.

One extractor serves declaration-like nodes (``class A``, ``def f``) and
member-access nodes (``obj.attr``) alike, so name based filters are written
once and reused for any kind.

Lookup is driven by two explicit accessor tables keyed by node class:

- primary name: the node's own declared name (``ClassDef.name``, ``Param.name``, ...)
- accessed member: the right-hand side of a member access (``Attribute.attr``)

The primary table is consulted first; the member table only when the node has
no primary position or that position does not hold a plain identifier.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Type

import libcst as cst

NameAccessor = Callable[[cst.CSTNode], Optional[cst.CSTNode]]

_PRIMARY_NAME: Dict[Type[cst.CSTNode], NameAccessor] = {
    cst.ClassDef: lambda n: n.name,
    cst.FunctionDef: lambda n: n.name,
    cst.Param: lambda n: n.name,
    cst.ImportAlias: lambda n: n.name,
    cst.AsName: lambda n: n.name,
    cst.TypeAlias: lambda n: n.name,
    cst.TypeVar: lambda n: n.name,
    cst.ParamSpec: lambda n: n.name,
    cst.TypeVarTuple: lambda n: n.name,
    cst.MatchAs: lambda n: n.name,
    cst.MatchStar: lambda n: n.name,
}

_MEMBER_NAME: Dict[Type[cst.CSTNode], NameAccessor] = {
    cst.Attribute: lambda n: n.attr,
}


def register_name_accessor(
    kind: Type[cst.CSTNode], accessor: NameAccessor, *, member: bool = False
) -> None:
    """
    Register where the identifier of ``kind`` nodes lives.

    Args:
        kind: LibCST node class
        accessor: returns the child node holding the identifier (or None)
        member: register as accessed-member position instead of primary name
    """
    table = _MEMBER_NAME if member else _PRIMARY_NAME
    table[kind] = accessor


def _identifier(position: Optional[cst.CSTNode]) -> Optional[str]:
    if isinstance(position, cst.Name):
        return position.value
    return None


def get_name(node: cst.CSTNode) -> Optional[str]:
    """Return the primary identifier of ``node``, or None when it exposes none."""
    kind = type(node)
    accessor = _PRIMARY_NAME.get(kind)
    if accessor is not None:
        name = _identifier(accessor(node))
        if name is not None:
            return name
    accessor = _MEMBER_NAME.get(kind)
    if accessor is not None:
        return _identifier(accessor(node))
    return None


def has_identifier(node: cst.CSTNode) -> bool:
    return get_name(node) is not None


def is_exported(name: Optional[str]) -> bool:
    """Visibility convention used by exported-only filters: uppercase first letter."""
    return bool(name) and name[0].isupper()
