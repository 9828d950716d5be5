"""
Custom exception classes with context for relay-pagination.

All exceptions inherit from RelayPaginationError base class and support
attaching contextual information for better debugging and logging.
"""

from __future__ import annotations


class RelayPaginationError(Exception):
    """
    Base exception for relay-pagination.

    All custom exceptions should inherit from this class to enable
    consistent error handling by callers.

    Attributes:
        message: Human-readable error message
        context: Optional dictionary with additional context for logging/debugging
    """

    def __init__(self, message: str, context: dict[str, object] | None = None):
        """
        Initialize exception with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dictionary with contextual information
                    (argument name, offending value, cursor, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class PaginationError(RelayPaginationError, ValueError):
    """
    Pagination request rejected.

    Base class for request-level pagination failures. Callers are expected
    to translate it into a client error response.
    """


class MalformedCursorError(PaginationError):
    """
    Cursor could not be decoded.

    Raised when an ``after``/``before`` token was not produced by
    ``encode_cursor`` or decodes to a negative offset.

    Example:
        raise MalformedCursorError(
            "Cursor format is invalid",
            context={"cursor": "Zm9vOmJhcg"}
        )
    """


class InvalidArgumentError(PaginationError):
    """
    Pagination argument out of range.

    Raised for a negative ``first``/``last``, a negative offset or a
    negative edge count. Values are never clamped to zero.

    Example:
        raise InvalidArgumentError(
            "first must be non-negative",
            context={"argument": "first", "value": -1}
        )
    """


class ConfigurationError(RelayPaginationError):
    """
    Configuration error.

    Raised when configuration loading, validation, or parsing fails.

    Example:
        raise ConfigurationError(
            "Invalid YAML in config file",
            context={"config_file": "/etc/relay-pagination.yaml"}
        )
    """
