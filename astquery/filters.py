"""
Filters deciding which LibCST nodes a query matches.

Every filter implements ``matches(node) -> bool`` and must be a pure function
of the node's kind and fields. The named strategies (set, pattern, method)
also constrain on node kind; FuncFilter wraps an arbitrary predicate so ad hoc
queries and compositions need no new class.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional, Tuple, Type, Union

import libcst as cst

from .errors import FilterConfigurationError, TypeResolutionError
from .kinds import resolve_kind
from .names import get_name, is_exported
from .type_names import receiver_type_name

logger = logging.getLogger(__name__)

NodePredicate = Callable[[cst.CSTNode], bool]

DEFAULT_RECEIVER_NAMES = ("self", "cls")


class Filter(ABC):
    """Decides whether a node is a query match."""

    @abstractmethod
    def matches(self, node: cst.CSTNode) -> bool:
        raise NotImplementedError

    def __call__(self, node: cst.CSTNode) -> bool:
        return self.matches(node)


@dataclass(frozen=True)
class SetFilter(Filter):
    """Matches nodes of ``kind`` whose identifier is one of ``names``."""

    names: FrozenSet[str]
    kind: Type[cst.CSTNode]

    def __post_init__(self) -> None:
        if isinstance(self.names, str):
            raise FilterConfigurationError(
                "names must be a collection of strings, not a single string",
                field="names",
            )
        try:
            names = frozenset(self.names)
        except TypeError as e:
            raise FilterConfigurationError(
                f"names must be iterable: {e}", field="names"
            ) from e
        for name in names:
            if not isinstance(name, str):
                raise FilterConfigurationError(
                    f"names must contain strings, got {name!r}", field="names"
                )
        object.__setattr__(self, "names", names)
        object.__setattr__(self, "kind", resolve_kind(self.kind))

    def matches(self, node: cst.CSTNode) -> bool:
        if type(node) is not self.kind:
            return False
        name = get_name(node)
        return name is not None and name in self.names


@dataclass(frozen=True)
class PatternFilter(Filter):
    """
    Matches nodes of ``kind`` whose identifier contains a match of ``pattern``.

    The search is unanchored: ``Service`` matches "MyServiceImpl". Anchor the
    pattern (``^...$``) to require a full-name match.
    """

    pattern: re.Pattern
    kind: Type[cst.CSTNode]

    def __post_init__(self) -> None:
        pattern = self.pattern
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise FilterConfigurationError(
                    f"Invalid pattern {self.pattern!r}: {e}", field="pattern"
                ) from e
        elif not isinstance(pattern, re.Pattern) or not isinstance(pattern.pattern, str):
            raise FilterConfigurationError(
                f"pattern must be a str or compiled str pattern, got {pattern!r}",
                field="pattern",
            )
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "kind", resolve_kind(self.kind))

    def matches(self, node: cst.CSTNode) -> bool:
        if type(node) is not self.kind:
            return False
        name = get_name(node)
        return name is not None and self.pattern.search(name) is not None


def receiver_params(
    func: cst.FunctionDef, receiver_names: Iterable[str] = DEFAULT_RECEIVER_NAMES
) -> Tuple[cst.Param, ...]:
    """Leading positional parameters of ``func`` that act as receivers."""
    names = set(receiver_names)
    out = []
    for param in (*func.params.posonly_params, *func.params.params):
        if param.name.value not in names:
            break
        out.append(param)
    return tuple(out)


@dataclass(frozen=True)
class MethodFilter(Filter):
    """
    Matches methods bound to ``receiver_type``.

    A candidate is a FunctionDef with exactly one receiver parameter (see
    ``receiver_params``) annotated with ``receiver_type``, directly or through
    one level of indirection (``"ServiceOne"``, ``type[ServiceOne]``).
    """

    receiver_type: str
    exported_only: bool = False
    receiver_names: Tuple[str, ...] = DEFAULT_RECEIVER_NAMES

    def __post_init__(self) -> None:
        if not isinstance(self.receiver_type, str) or not self.receiver_type:
            raise FilterConfigurationError(
                "receiver_type must be a non-empty string", field="receiver_type"
            )
        if isinstance(self.receiver_names, str) or not self.receiver_names:
            raise FilterConfigurationError(
                "receiver_names must be a non-empty collection of names",
                field="receiver_names",
            )
        object.__setattr__(self, "receiver_names", tuple(self.receiver_names))

    def matches(self, node: cst.CSTNode) -> bool:
        if not isinstance(node, cst.FunctionDef):
            return False
        receivers = receiver_params(node, self.receiver_names)
        if len(receivers) != 1:
            # No receiver: free function or staticmethod. Several: malformed.
            return False
        try:
            recv_type = receiver_type_name(receivers[0])
        except TypeResolutionError as e:
            logger.debug(f"Skipping method '{node.name.value}': {e}")
            return False
        if recv_type != self.receiver_type:
            return False
        if self.exported_only and not is_exported(node.name.value):
            return False
        return True


class FuncFilter(Filter):
    """Adapts a plain ``node -> bool`` callable to the Filter interface."""

    def __init__(self, func: NodePredicate, description: Optional[str] = None):
        if not callable(func):
            raise FilterConfigurationError(
                f"FuncFilter needs a callable, got {func!r}", field="func"
            )
        self.func = func
        self.description = description or getattr(func, "__name__", "predicate")

    def matches(self, node: cst.CSTNode) -> bool:
        return bool(self.func(node))

    def __repr__(self) -> str:
        return f"FuncFilter({self.description})"


AnyFilter = Union[Filter, NodePredicate]


def as_filter(value: AnyFilter) -> Filter:
    """Return ``value`` as a Filter, wrapping bare callables."""
    if isinstance(value, Filter):
        return value
    return FuncFilter(value)


def all_of(*filters: AnyFilter) -> FuncFilter:
    """Match nodes accepted by every filter."""
    parts = tuple(as_filter(f) for f in filters)
    return FuncFilter(
        lambda node: all(f.matches(node) for f in parts),
        description="all_of(" + ", ".join(repr(f) for f in parts) + ")",
    )


def any_of(*filters: AnyFilter) -> FuncFilter:
    """Match nodes accepted by at least one filter."""
    parts = tuple(as_filter(f) for f in filters)
    return FuncFilter(
        lambda node: any(f.matches(node) for f in parts),
        description="any_of(" + ", ".join(repr(f) for f in parts) + ")",
    )


def negate(flt: AnyFilter) -> FuncFilter:
    inner = as_filter(flt)
    return FuncFilter(lambda node: not inner.matches(node), description=f"not({inner!r})")
