"""
Shared CLI helpers: loading paths and printing matches.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import json
from pathlib import Path
from typing import List, Sequence

import click

from ..errors import SourceParseError
from ..finder import Match
from ..loader import ParsedModule, parse_paths


def load_paths(
    paths: Sequence[Path], recursive: bool, skip_invalid: bool
) -> List[ParsedModule]:
    """Parse CLI path arguments, turning parse failures into usage errors."""
    try:
        return parse_paths(paths, recursive=recursive, skip_invalid=skip_invalid)
    except SourceParseError as e:
        raise click.ClickException(e.message)


def format_match(match: Match) -> str:
    name = match.name if match.name is not None else "-"
    return f"{match.path}:{match.start_line}:{match.start_col}  {match.node_type}  {name}"


def echo_matches(matches: List[Match], format: str, label: str = None) -> None:
    if format == "json":
        click.echo(json.dumps([m.to_dict() for m in matches], indent=2))
        return
    if label:
        click.echo(f"{label}: {len(matches)} match(es)")
    for m in matches:
        click.echo(f"  {format_match(m)}" if label else format_match(m))
