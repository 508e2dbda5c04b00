"""
Tests for identifier extraction.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import libcst as cst
import pytest

from astquery import names
from astquery.finder import find_one
from astquery.names import get_name, has_identifier, is_exported, register_name_accessor


def _first(source: str, kind):
    return find_one(cst.parse_module(source), lambda n: type(n) is kind)


def test_class_and_function_names() -> None:
    assert get_name(_first("class ServiceOne:\n    pass\n", cst.ClassDef)) == "ServiceOne"
    assert get_name(_first("def handle(x):\n    pass\n", cst.FunctionDef)) == "handle"


def test_param_and_import_alias_names() -> None:
    assert get_name(_first("def f(request):\n    pass\n", cst.Param)) == "request"
    assert get_name(_first("import os\n", cst.ImportAlias)) == "os"


def test_member_access_uses_accessed_member() -> None:
    expr = cst.parse_expression("client.session.Check")
    assert isinstance(expr, cst.Attribute)
    assert get_name(expr) == "Check"
    assert get_name(expr.value) == "session"


def test_primary_position_without_identifier_reports_none() -> None:
    # `import os.path`: the alias name is an Attribute, not an identifier.
    alias = _first("import os.path\n", cst.ImportAlias)
    assert get_name(alias) is None


@pytest.mark.parametrize(
    "node",
    [
        cst.Name("x"),
        cst.Integer("1"),
        cst.parse_expression("f(x)"),
        cst.parse_module("x = 1\n"),
    ],
)
def test_nodes_without_identifier(node) -> None:
    assert get_name(node) is None
    assert not has_identifier(node)


def test_register_name_accessor(monkeypatch) -> None:
    monkeypatch.setattr(names, "_PRIMARY_NAME", dict(names._PRIMARY_NAME))
    decorator = _first("@property\ndef f(self):\n    pass\n", cst.Decorator)
    assert get_name(decorator) is None

    register_name_accessor(cst.Decorator, lambda n: n.decorator)
    assert get_name(decorator) == "property"


def test_register_member_accessor(monkeypatch) -> None:
    monkeypatch.setattr(names, "_MEMBER_NAME", dict(names._MEMBER_NAME))
    call = cst.parse_expression("Check(request)")
    register_name_accessor(cst.Call, lambda n: n.func, member=True)
    assert get_name(call) == "Check"


@pytest.mark.parametrize(
    "name,expected",
    [("Get", True), ("List", True), ("get", False), ("_helper", False), ("", False), (None, False)],
)
def test_is_exported(name, expected) -> None:
    assert is_exported(name) is expected
