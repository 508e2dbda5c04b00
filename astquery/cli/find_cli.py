"""
CLI command: find.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from ..errors import FilterConfigurationError
from ..filters import Filter, MethodFilter, PatternFilter, SetFilter
from ..finder import locate
from ..logging import configure_logging
from .output import echo_matches, load_paths

logger = logging.getLogger(__name__)

_PARAM_HINTS = {
    "names": "--name",
    "pattern": "--pattern",
    "kind": "--kind",
    "receiver_type": "--receiver",
}


def _build_filter(
    names: Tuple[str, ...],
    pattern: Optional[str],
    receiver: Optional[str],
    kind: Optional[str],
    exported_only: bool,
) -> Filter:
    options = (("--name", names), ("--pattern", pattern), ("--receiver", receiver))
    selected = [opt for opt, val in options if val]
    if len(selected) != 1:
        raise click.UsageError("Specify exactly one of --name, --pattern or --receiver")
    if exported_only and not receiver:
        raise click.UsageError("--exported-only requires --receiver")
    if receiver:
        if kind:
            raise click.UsageError("--kind cannot be combined with --receiver")
        return MethodFilter(receiver_type=receiver, exported_only=exported_only)
    if not kind:
        raise click.UsageError(f"{selected[0]} requires --kind")
    if names:
        return SetFilter(names=frozenset(names), kind=kind)
    return PatternFilter(pattern=pattern, kind=kind)


@click.command(name="find")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option("--name", "-n", "names", multiple=True, help="Identifier to match (repeatable)")
@click.option("--pattern", "-p", help="Regular expression searched in identifiers (unanchored)")
@click.option("--receiver", "-R", help="Match methods whose receiver is annotated with this type")
@click.option("--kind", "-k", help="Node kind: alias (class, function, attribute, ...) or LibCST class name")
@click.option("--exported-only", "-e", is_flag=True, help="With --receiver: only uppercase method names")
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
def find(
    paths: Tuple[Path, ...],
    names: Tuple[str, ...],
    pattern: Optional[str],
    receiver: Optional[str],
    kind: Optional[str],
    exported_only: bool,
    recursive: bool,
    skip_invalid: bool,
    format: str,
    verbose: bool,
) -> None:
    """Find nodes matching a single filter."""
    configure_logging(verbose)
    try:
        flt = _build_filter(names, pattern, receiver, kind, exported_only)
    except FilterConfigurationError as e:
        raise click.BadParameter(e.message, param_hint=_PARAM_HINTS.get(e.field))

    parsed = load_paths(paths, recursive, skip_invalid)
    matches = locate(parsed, flt)
    logger.debug(f"{len(matches)} match(es) in {len(parsed)} module(s)")

    if format == "text" and not matches:
        click.echo("No matches found")
        return
    echo_matches(matches, format)
