"""
Load Python sources into LibCST trees for querying.

Thin wrapper around ``libcst.parse_module``; nothing here interprets the code.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider

from .errors import SourceParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class ParsedModule:
    """A parsed source file and its module node."""

    path: str
    module: cst.Module
    source: str = field(repr=False, default="")

    @cached_property
    def positions(self) -> Mapping[cst.CSTNode, Any]:
        """CodeRange for every node of ``module``, keyed by node identity."""
        # unsafe_skip_copy keeps the original nodes as keys, so nodes returned
        # by find() can be looked up directly.
        wrapper = MetadataWrapper(self.module, unsafe_skip_copy=True)
        return wrapper.resolve(PositionProvider)

    def code_for(self, node: cst.CSTNode) -> str:
        return self.module.code_for_node(node)


def parse_source(source: str, path: str = "<string>") -> ParsedModule:
    """Parse ``source`` into a ParsedModule."""
    try:
        module = cst.parse_module(source)
    except cst.ParserSyntaxError as e:
        raise SourceParseError(f"Failed to parse {path}: {e}", path=path, cause=e) from e
    return ParsedModule(path=path, module=module, source=source)


def parse_file(path: PathLike) -> ParsedModule:
    """Read and parse a single Python file."""
    file_path = Path(path)
    try:
        source = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceParseError(
            f"Failed to read {file_path}: {e}", path=str(file_path), cause=e
        ) from e
    return parse_source(source, path=str(file_path))


def _python_files(directory: Path, recursive: bool) -> List[Path]:
    pattern = "**/*.py" if recursive else "*.py"
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def parse_package(
    directory: PathLike, *, recursive: bool = False, skip_invalid: bool = False
) -> List[ParsedModule]:
    """
    Parse every ``*.py`` file of a directory, ordered by path.

    Args:
        directory: package directory
        recursive: include sub-directories
        skip_invalid: log and skip files that fail to parse instead of raising
    """
    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise SourceParseError(f"Not a directory: {dir_path}", path=str(dir_path))
    parsed: List[ParsedModule] = []
    for file_path in _python_files(dir_path, recursive):
        try:
            parsed.append(parse_file(file_path))
        except SourceParseError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping unparsable file {file_path}: {e.message}")
    logger.debug(f"Parsed {len(parsed)} module(s) from {dir_path}")
    return parsed


def parse_paths(
    paths: Iterable[PathLike], *, recursive: bool = False, skip_invalid: bool = False
) -> List[ParsedModule]:
    """Parse a mix of files and directories, preserving argument order."""
    parsed: List[ParsedModule] = []
    for path in paths:
        p = Path(path)
        if p.is_dir():
            parsed.extend(
                parse_package(p, recursive=recursive, skip_invalid=skip_invalid)
            )
            continue
        try:
            parsed.append(parse_file(p))
        except SourceParseError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping unparsable file {p}: {e.message}")
    return parsed


def roots(parsed: Iterable[ParsedModule]) -> List[cst.Module]:
    """Module nodes of ``parsed``, usable as ``find`` roots."""
    return [p.module for p in parsed]
