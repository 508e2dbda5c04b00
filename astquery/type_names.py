"""
Resolve type references in annotations to their base type name.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import libcst as cst

from .errors import TypeResolutionError

# Subscripted forms that refer to the class object of their single argument.
CLASS_REFERENCE_NAMES = frozenset({"type", "Type"})

_EMPTY_MODULE = cst.Module(body=[])


def _describe(expr: cst.CSTNode) -> str:
    return _EMPTY_MODULE.code_for_node(expr)


def _unwrap_indirection(expr: cst.BaseExpression):
    """Return the referenced expression if ``expr`` is one level of indirection."""
    if isinstance(expr, cst.SimpleString):
        try:
            value = expr.evaluated_value
        except (SyntaxError, ValueError):
            # Bad escapes such as "\N{NO SUCH NAME}" parse but do not evaluate.
            return None
        if not isinstance(value, str):
            return None
        try:
            return cst.parse_expression(value.strip())
        except cst.ParserSyntaxError:
            return None
    if (
        isinstance(expr, cst.Subscript)
        and isinstance(expr.value, cst.Name)
        and expr.value.value in CLASS_REFERENCE_NAMES
        and len(expr.slice) == 1
        and isinstance(expr.slice[0].slice, cst.Index)
    ):
        return expr.slice[0].slice.value
    return None


def resolve_type_name(expr: cst.BaseExpression) -> str:
    """
    Return the base name of a type reference.

    ``ServiceOne`` resolves directly. A single level of indirection is
    unwrapped first: the forward reference ``"ServiceOne"`` and the class
    reference ``type[ServiceOne]`` both resolve to ``ServiceOne``.

    Raises:
        TypeResolutionError: for any other shape (qualified names, generics,
            nested indirection, ...)
    """
    if isinstance(expr, cst.Name):
        return expr.value
    target = _unwrap_indirection(expr)
    if isinstance(target, cst.Name):
        return target.value
    raise TypeResolutionError(
        f"Expression is not a simple type reference: {_describe(expr)}",
        expression=_describe(expr),
    )


def receiver_type_name(param: cst.Param) -> str:
    """Resolve the annotated type of a receiver parameter."""
    if param.annotation is None:
        raise TypeResolutionError(
            f"Receiver parameter '{param.name.value}' has no annotation"
        )
    return resolve_type_name(param.annotation.annotation)
