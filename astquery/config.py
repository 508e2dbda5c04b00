"""
Query configuration: filters described in JSON and validated with pydantic.

Example query file::

    {
      "queries": [
        {"name": "services", "filter": {"type": "set", "kind": "class",
                                        "names": ["ServiceOne", "ServiceTwo"]}},
        {"name": "handlers", "filter": {"type": "pattern", "kind": "FunctionDef",
                                        "pattern": "^handle_"}},
        {"name": "api", "filter": {"type": "method", "receiver_type": "ServiceOne",
                                   "exported_only": true}}
      ]
    }

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
import re
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from .errors import ConfigurationError, FilterConfigurationError
from .filters import DEFAULT_RECEIVER_NAMES, Filter, MethodFilter, PatternFilter, SetFilter
from .kinds import resolve_kind


class _KindMixin(BaseModel):
    kind: str = Field(..., description="LibCST node class name or alias")

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Validate that the kind names a LibCST node class."""
        resolve_kind(v)
        return v


class SetFilterConfig(_KindMixin):
    """Match nodes of a kind whose name is in a set."""

    model_config = {"extra": "forbid"}

    type: Literal["set"] = "set"
    names: List[str] = Field(..., description="Candidate identifiers")

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("names must not be empty")
        return v


class PatternFilterConfig(_KindMixin):
    """Match nodes of a kind whose name contains a regular expression match."""

    model_config = {"extra": "forbid"}

    type: Literal["pattern"] = "pattern"
    pattern: str = Field(..., description="Regular expression, searched unanchored")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {v!r}: {e}")
        return v


class MethodFilterConfig(BaseModel):
    """Match methods whose receiver is annotated with a type."""

    model_config = {"extra": "forbid"}

    type: Literal["method"] = "method"
    receiver_type: str = Field(..., min_length=1, description="Receiver type name")
    exported_only: bool = Field(default=False, description="Uppercase names only")
    receiver_names: Tuple[str, ...] = Field(
        default=DEFAULT_RECEIVER_NAMES,
        min_length=1,
        description="Parameter names treated as receivers",
    )


FilterConfig = Annotated[
    Union[SetFilterConfig, PatternFilterConfig, MethodFilterConfig],
    Field(discriminator="type"),
]


class NamedQuery(BaseModel):
    """A filter with a name used in reports."""

    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1)
    filter: FilterConfig


class QueryFile(BaseModel):
    """Top-level query file."""

    model_config = {"extra": "forbid"}

    queries: List[NamedQuery] = Field(default_factory=list)


def build_filter(config: Union[SetFilterConfig, PatternFilterConfig, MethodFilterConfig]) -> Filter:
    """Create the runtime filter for a validated filter config."""
    if isinstance(config, SetFilterConfig):
        return SetFilter(names=frozenset(config.names), kind=resolve_kind(config.kind))
    if isinstance(config, PatternFilterConfig):
        return PatternFilter(pattern=config.pattern, kind=resolve_kind(config.kind))
    if isinstance(config, MethodFilterConfig):
        return MethodFilter(
            receiver_type=config.receiver_type,
            exported_only=config.exported_only,
            receiver_names=config.receiver_names,
        )
    raise ConfigurationError(f"Unsupported filter config: {config!r}")


def validate_query_file(
    config_path: Path,
) -> Tuple[bool, Optional[str], Optional[QueryFile]]:
    """
    Validate a query file.

    Args:
        config_path: Path to JSON query file

    Returns:
        Tuple of (is_valid, error_message, query_file)
    """
    if not config_path.exists():
        return False, f"Query file not found: {config_path}", None
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        query_file = QueryFile(**data) if isinstance(data, dict) else None
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except ValueError as e:
        return False, f"Validation error: {str(e)}", None
    except OSError as e:
        return False, f"Cannot read query file: {str(e)}", None
    if query_file is None:
        return False, "Query file must contain a JSON object", None

    names = [q.name for q in query_file.queries]
    if len(names) != len(set(names)):
        duplicates = sorted({n for n in names if names.count(n) > 1})
        return False, f"Duplicate query names found: {duplicates}", None
    return True, None, query_file


def load_query_file(config_path: Path) -> List[Tuple[str, Filter]]:
    """
    Load a query file and build its filters.

    Returns:
        List of (query name, filter) in file order

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    is_valid, error, query_file = validate_query_file(Path(config_path))
    if not is_valid or query_file is None:
        raise ConfigurationError(
            error or "Invalid query file", details={"path": str(config_path)}
        )
    queries: List[Tuple[str, Filter]] = []
    for q in query_file.queries:
        try:
            queries.append((q.name, build_filter(q.filter)))
        except FilterConfigurationError as e:
            raise ConfigurationError(
                f"Invalid filter in query '{q.name}': {e.message}",
                config_key=e.field,
                details={"path": str(config_path), "query": q.name},
            ) from e
    return queries
