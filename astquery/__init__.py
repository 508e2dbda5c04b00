"""
astquery - find nodes in LibCST syntax trees by name, pattern or receiver type.

Public API:
  - find(roots, filter) -> list of matching nodes (document order, pruned)
  - find_one(roots, filter) -> first match or None
  - SetFilter, PatternFilter, MethodFilter, FuncFilter (+ all_of, any_of, negate)
  - get_name(node), resolve_type_name(expr)
  - parse_source / parse_file / parse_package, locate(parsed, filter)

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

from .errors import (
    AstQueryError,
    ConfigurationError,
    FilterConfigurationError,
    SourceParseError,
    TypeResolutionError,
)
from .filters import (
    Filter,
    FuncFilter,
    MethodFilter,
    PatternFilter,
    SetFilter,
    all_of,
    any_of,
    negate,
    receiver_params,
)
from .finder import Match, find, find_one, locate
from .kinds import resolve_kind
from .loader import ParsedModule, parse_file, parse_package, parse_paths, parse_source, roots
from .names import get_name, has_identifier, is_exported, register_name_accessor
from .type_names import receiver_type_name, resolve_type_name
from .walker import iter_nodes, walk

__all__ = [
    # Errors
    "AstQueryError",
    "ConfigurationError",
    "FilterConfigurationError",
    "SourceParseError",
    "TypeResolutionError",
    # Filters
    "Filter",
    "FuncFilter",
    "MethodFilter",
    "PatternFilter",
    "SetFilter",
    "all_of",
    "any_of",
    "negate",
    "receiver_params",
    # Find
    "Match",
    "find",
    "find_one",
    "locate",
    # Names and types
    "get_name",
    "has_identifier",
    "is_exported",
    "register_name_accessor",
    "receiver_type_name",
    "resolve_type_name",
    "resolve_kind",
    # Traversal
    "iter_nodes",
    "walk",
    # Loading
    "ParsedModule",
    "parse_file",
    "parse_package",
    "parse_paths",
    "parse_source",
    "roots",
]
