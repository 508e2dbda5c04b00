"""
Tests for the astquery CLI.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from pathlib import Path

from click.testing import CliRunner

from astquery.cli.main import cli


def _invoke(*args):
    return CliRunner().invoke(cli, [str(a) for a in args])


def test_lists_commands() -> None:
    result = _invoke("--help")
    assert result.exit_code == 0
    assert "find" in result.output
    assert "run" in result.output


def test_find_by_name(service_dir: Path) -> None:
    result = _invoke("find", service_dir, "--name", "ServiceOne", "--name", "ServiceTwo", "--kind", "class")
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert "service_one.py:6:0  ClassDef  ServiceOne" in lines[0]
    assert "ServiceTwo" in lines[1]


def test_find_by_pattern_json(service_dir: Path) -> None:
    result = _invoke("find", service_dir, "--pattern", "Service", "--kind", "ClassDef", "--format", "json")
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [m["name"] for m in data] == ["MyServiceImpl", "ServiceOne", "ServiceTwo"]
    assert all(m["node_type"] == "ClassDef" for m in data)


def test_find_by_receiver(service_dir: Path) -> None:
    result = _invoke(
        "find", service_dir / "service_two.py", "--receiver", "ServiceTwo", "--exported-only", "-f", "json"
    )
    assert result.exit_code == 0, result.output
    assert [m["name"] for m in json.loads(result.output)] == ["Get", "List", "UncheckedMeth"]


def test_find_no_matches(service_dir: Path) -> None:
    result = _invoke("find", service_dir, "--name", "Missing", "--kind", "class")
    assert result.exit_code == 0
    assert "No matches found" in result.output


def test_find_usage_errors(service_dir: Path) -> None:
    assert _invoke("find", service_dir, "--kind", "class").exit_code == 2
    assert _invoke("find", service_dir, "--name", "A").exit_code == 2
    assert _invoke("find", service_dir, "--name", "A", "--pattern", "A", "--kind", "class").exit_code == 2
    assert _invoke("find", service_dir, "--receiver", "A", "--kind", "class").exit_code == 2
    assert _invoke("find", service_dir, "--name", "A", "--kind", "class", "--exported-only").exit_code == 2


def test_find_invalid_pattern_and_kind(service_dir: Path) -> None:
    result = _invoke("find", service_dir, "--pattern", "Service(", "--kind", "class")
    assert result.exit_code == 2
    assert "Invalid pattern" in result.output
    assert _invoke("find", service_dir, "--name", "A", "--kind", "NoSuchNode").exit_code == 2


def test_find_unparsable_file(tmp_path: Path) -> None:
    (tmp_path / "bad.py").write_text("def broken(:\n", encoding="utf-8")
    (tmp_path / "good.py").write_text("class A:\n    pass\n", encoding="utf-8")

    result = _invoke("find", tmp_path, "--name", "A", "--kind", "class")
    assert result.exit_code == 1
    assert "bad.py" in result.output

    result = _invoke("find", tmp_path, "--name", "A", "--kind", "class", "--skip-invalid")
    assert result.exit_code == 0
    assert "good.py:1:0  ClassDef  A" in result.output


def test_run_query_file(tmp_path: Path, service_dir: Path) -> None:
    config = tmp_path / "queries.json"
    config.write_text(
        json.dumps(
            {
                "queries": [
                    {"name": "services", "filter": {"type": "pattern", "kind": "class", "pattern": "^Service"}},
                    {"name": "calls", "filter": {"type": "set", "kind": "attribute", "names": ["Check"]}},
                ]
            }
        ),
        encoding="utf-8",
    )
    result = _invoke("run", service_dir, "--config", config, "--format", "json")
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert [m["name"] for m in report["services"]] == ["ServiceOne", "ServiceTwo"]
    assert len(report["calls"]) == 4

    result = _invoke("run", service_dir, "-C", config)
    assert result.exit_code == 0
    assert "services: 2 match(es)" in result.output
    assert "calls: 4 match(es)" in result.output


def test_run_invalid_query_file(tmp_path: Path, service_dir: Path) -> None:
    config = tmp_path / "queries.json"
    config.write_text(json.dumps({"queries": [{"name": "q", "filter": {"type": "nope"}}]}), encoding="utf-8")
    result = _invoke("run", service_dir, "--config", config)
    assert result.exit_code == 1
    assert "Validation error" in result.output


def test_run_rejects_empty_receiver_names(tmp_path: Path, service_dir: Path) -> None:
    config = tmp_path / "queries.json"
    config.write_text(
        json.dumps(
            {"queries": [{"name": "api", "filter": {"type": "method", "receiver_type": "A", "receiver_names": []}}]}
        ),
        encoding="utf-8",
    )
    result = _invoke("run", service_dir, "--config", config)
    assert result.exit_code == 1
    assert "Validation error" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
