"""
Exception hierarchy for astquery.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Optional


class AstQueryError(Exception):
    """Base exception for astquery operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class FilterConfigurationError(AstQueryError, ValueError):
    """Raised when a filter is constructed with an invalid configuration.

    Raised before any traversal starts, so a half-configured query never runs.
    """

    def __init__(self, message: str, field: str = None, details: dict = None):
        """
        Initialize filter configuration error.

        Args:
            message: Error message
            field: Optional name of the offending filter parameter
            details: Optional additional details
        """
        super().__init__(message, code="FILTER_CONFIGURATION_ERROR", details=details)
        self.field = field


class TypeResolutionError(AstQueryError):
    """Raised when a type reference cannot be reduced to a base name."""

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(
            message,
            code="TYPE_RESOLUTION_ERROR",
            details={"expression": expression} if expression else None,
        )
        self.expression = expression


class SourceParseError(AstQueryError):
    """Raised when LibCST cannot parse a source file."""

    def __init__(self, message: str, path: str = None, cause: Exception = None):
        """
        Initialize source parse error.

        Args:
            message: Error message
            path: Path of the file that failed to parse
            cause: Original LibCST exception
        """
        super().__init__(message, code="SOURCE_PARSE_ERROR", details={"path": path})
        self.path = path
        self.cause = cause


class ConfigurationError(AstQueryError):
    """Raised when a query configuration file is invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
