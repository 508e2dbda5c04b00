"""
CLI command: run - execute the named queries of a JSON query file.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import json
from pathlib import Path
from typing import Tuple

import click

from ..config import load_query_file
from ..errors import ConfigurationError
from ..finder import locate
from ..logging import configure_logging
from .output import echo_matches, load_paths


@click.command(name="run")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--config",
    "-C",
    "config_path",
    required=True,
    help="Path to JSON query file",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
)
@click.option("--recursive", "-r", is_flag=True, help="Descend into sub-directories")
@click.option("--skip-invalid", is_flag=True, help="Skip files that fail to parse")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def run(
    paths: Tuple[Path, ...],
    config_path: Path,
    recursive: bool,
    skip_invalid: bool,
    format: str,
    verbose: bool,
) -> None:
    """Run every query of a query file against PATHS."""
    configure_logging(verbose)
    try:
        queries = load_query_file(config_path)
    except ConfigurationError as e:
        raise click.ClickException(e.message)

    parsed = load_paths(paths, recursive, skip_invalid)

    if format == "json":
        report = {name: [m.to_dict() for m in locate(parsed, flt)] for name, flt in queries}
        click.echo(json.dumps(report, indent=2))
        return

    for name, flt in queries:
        echo_matches(locate(parsed, flt), format, label=name)
