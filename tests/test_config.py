"""
Tests for JSON query configuration.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from pathlib import Path

import libcst as cst
import pytest

from astquery.config import (
    MethodFilterConfig,
    NamedQuery,
    build_filter,
    load_query_file,
    validate_query_file,
)
from astquery.errors import ConfigurationError, FilterConfigurationError
from astquery.filters import MethodFilter, PatternFilter, SetFilter


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "queries.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


VALID = {
    "queries": [
        {"name": "services", "filter": {"type": "set", "kind": "class", "names": ["ServiceOne", "ServiceTwo"]}},
        {"name": "service-like", "filter": {"type": "pattern", "kind": "ClassDef", "pattern": "Service"}},
        {"name": "api", "filter": {"type": "method", "receiver_type": "ServiceOne", "exported_only": True}},
    ]
}


def test_load_query_file(tmp_path: Path) -> None:
    queries = load_query_file(_write(tmp_path, VALID))
    assert [name for name, _ in queries] == ["services", "service-like", "api"]

    _, set_filter = queries[0]
    assert set_filter == SetFilter(names={"ServiceOne", "ServiceTwo"}, kind=cst.ClassDef)

    _, pattern_filter = queries[1]
    assert isinstance(pattern_filter, PatternFilter)
    assert pattern_filter.kind is cst.ClassDef
    assert pattern_filter.pattern.pattern == "Service"

    _, method_filter = queries[2]
    assert method_filter == MethodFilter(receiver_type="ServiceOne", exported_only=True)


@pytest.mark.parametrize(
    "filter_config",
    [
        {"type": "set", "kind": "class", "names": []},
        {"type": "set", "kind": "NoSuchNode", "names": ["A"]},
        {"type": "pattern", "kind": "class", "pattern": "Service("},
        {"type": "method", "receiver_type": ""},
        {"type": "method", "receiver_type": "A", "unknown": 1},
        {"type": "method", "receiver_type": "A", "receiver_names": []},
        {"type": "regex", "kind": "class", "pattern": "A"},
    ],
)
def test_invalid_filter_configs(tmp_path: Path, filter_config) -> None:
    path = _write(tmp_path, {"queries": [{"name": "q", "filter": filter_config}]})
    is_valid, error, query_file = validate_query_file(path)
    assert not is_valid
    assert error
    assert query_file is None
    with pytest.raises(ConfigurationError):
        load_query_file(path)


def test_duplicate_query_names(tmp_path: Path) -> None:
    query = {"name": "q", "filter": {"type": "method", "receiver_type": "A"}}
    is_valid, error, _ = validate_query_file(_write(tmp_path, {"queries": [query, query]}))
    assert not is_valid
    assert "Duplicate query names" in error


def test_missing_and_malformed_files(tmp_path: Path) -> None:
    is_valid, error, _ = validate_query_file(tmp_path / "missing.json")
    assert not is_valid
    assert "not found" in error

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    is_valid, error, _ = validate_query_file(bad)
    assert not is_valid
    assert "Invalid JSON" in error

    listed = _write(tmp_path, [1, 2])
    with pytest.raises(ConfigurationError) as exc_info:
        load_query_file(listed)
    assert exc_info.value.code == "CONFIGURATION_ERROR"


def test_build_filter_from_model() -> None:
    query = NamedQuery(name="api", filter={"type": "method", "receiver_type": "ServiceTwo"})
    assert isinstance(query.filter, MethodFilterConfig)
    assert build_filter(query.filter) == MethodFilter(receiver_type="ServiceTwo")


def test_filter_construction_error_becomes_configuration_error(tmp_path: Path, monkeypatch) -> None:
    def reject(config):
        raise FilterConfigurationError("receiver_names must not be empty", field="receiver_names")

    monkeypatch.setattr("astquery.config.build_filter", reject)
    path = _write(tmp_path, {"queries": [{"name": "api", "filter": {"type": "method", "receiver_type": "A"}}]})
    with pytest.raises(ConfigurationError) as exc_info:
        load_query_file(path)
    assert exc_info.value.config_key == "receiver_names"
    assert "api" in exc_info.value.message
